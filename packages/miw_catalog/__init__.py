from .domain import Role, QuestionBankEntry
from .service import RoleCatalog

__all__ = [
    "Role",
    "QuestionBankEntry",
    "RoleCatalog",
]
