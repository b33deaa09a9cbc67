from typing import Any, Dict, List


class BaseFetcher:
    def fetch(self) -> List[Any]:
        raise NotImplementedError

    def normalize(self, raw: List[Any]) -> List[Dict[str, Any]]:
        raise NotImplementedError

    def health(self) -> str:
        return "OK"
