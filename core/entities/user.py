from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


@dataclass
class User:
    id: Optional[int]
    name: str
    email: str
    password: str  # хранится как есть, наружу не отдаётся

    def public_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data.pop("password", None)
        return data
