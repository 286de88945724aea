from typing import Dict, List, Mapping, Optional, Tuple

from packages.miw_core.logging import get_logger
from .data import ENGINEERING_ROLES, PREDEFINED_QUESTIONS
from .domain import Role, QuestionBankEntry

logger = get_logger("miw_catalog.service")


class RoleCatalog:
    """
    Read-only facade over the role catalog and the per-role question bank.
    Built once at process start; nothing here mutates after construction.
    """

    def __init__(
        self,
        roles: Optional[Mapping[str, dict]] = None,
        questions: Optional[Mapping[str, List[dict]]] = None
    ):
        raw_roles = ENGINEERING_ROLES if roles is None else roles
        raw_questions = PREDEFINED_QUESTIONS if questions is None else questions

        self._roles: Dict[str, Role] = {
            key: Role(
                key=key,
                name=item["name"],
                skills=tuple(item.get("skills", ())),
                question_types=tuple(item.get("question_types", ())),
            )
            for key, item in raw_roles.items()
        }
        self._questions: Dict[str, Tuple[QuestionBankEntry, ...]] = {
            key: tuple(
                QuestionBankEntry(
                    role_key=key,
                    question=entry["question"],
                    expected_answer=entry.get("expected_answer", ""),
                )
                for entry in entries
            )
            for key, entries in raw_questions.items()
        }
        logger.debug(
            f"Role catalog loaded. Roles: {len(self._roles)}, "
            f"Banks: {sum(1 for q in self._questions.values() if q)}"
        )

    def list_roles(self) -> Dict[str, Role]:
        """Entire catalog, in definition order."""
        return dict(self._roles)

    def has_role(self, role_key: Optional[str]) -> bool:
        return bool(role_key) and role_key in self._roles

    def get_role(self, role_key: str) -> Optional[Role]:
        return self._roles.get(role_key)

    def questions_for(self, role_key: str) -> Tuple[QuestionBankEntry, ...]:
        """Ordered predefined questions for a role; empty when the role has no bank."""
        return self._questions.get(role_key, ())

    def to_public_dict(self) -> Dict[str, dict]:
        """Body of GET /api/roles."""
        return {key: role.to_public_dict() for key, role in self._roles.items()}
