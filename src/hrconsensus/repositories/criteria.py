"""Rating criteria registry."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

import structlog

from ..schemas import RatingCriterion, RatingCriterionDraft
from ..storage import RecordStore
from .base import IdFactory, new_id

DEFAULT_CRITERIA: tuple[RatingCriterion, ...] = (
    RatingCriterion(
        id="1",
        name="Technical Skills",
        description="Proficiency in required technologies",
        weight=0.25,
        category="technical",
    ),
    RatingCriterion(
        id="2",
        name="Problem Solving",
        description="Analytical and critical thinking abilities",
        weight=0.20,
        category="technical",
    ),
    RatingCriterion(
        id="3",
        name="Communication",
        description="Clarity and effectiveness in communication",
        weight=0.15,
        category="communication",
    ),
    RatingCriterion(
        id="4",
        name="Cultural Fit",
        description="Alignment with company values and culture",
        weight=0.15,
        category="cultural",
    ),
    RatingCriterion(
        id="5",
        name="Leadership Potential",
        description="Ability to lead and inspire teams",
        weight=0.15,
        category="leadership",
    ),
    RatingCriterion(
        id="6",
        name="Growth Mindset",
        description="Willingness to learn and adapt",
        weight=0.10,
        category="cultural",
    ),
)


class CriteriaRegistry:
    """Ordered set of evaluation criteria.

    Weights are stored as given; nothing checks that they sum to 1.
    """

    collection = "rating_criteria"

    def __init__(
        self,
        store: RecordStore,
        *,
        seed_defaults: bool = True,
        id_factory: IdFactory | None = None,
    ) -> None:
        self._store = store
        self._seed_defaults = seed_defaults
        self._new_id = id_factory or new_id
        self._logger = structlog.get_logger(__name__)

    def list(self) -> list[RatingCriterion]:
        return [RatingCriterion.model_validate(item) for item in self._load()]

    def get(self, criterion_id: str) -> RatingCriterion | None:
        for criterion in self.list():
            if criterion.id == criterion_id:
                return criterion
        return None

    def create(self, draft: RatingCriterionDraft | Mapping[str, Any]) -> RatingCriterion:
        if not isinstance(draft, RatingCriterionDraft):
            draft = RatingCriterionDraft.model_validate(draft)
        criteria = self.list()
        criterion = RatingCriterion(id=self._new_id(), **draft.model_dump())
        criteria.append(criterion)
        self._persist(criteria)
        self._logger.info("criteria.created", criterion_id=criterion.id, name=criterion.name)
        return criterion

    def update(self, criterion_id: str, changes: Mapping[str, Any]) -> RatingCriterion | None:
        criteria = self.list()
        for index, criterion in enumerate(criteria):
            if criterion.id != criterion_id:
                continue
            merged = {**criterion.model_dump(), **changes, "id": criterion.id}
            criteria[index] = RatingCriterion.model_validate(merged)
            self._persist(criteria)
            self._logger.info("criteria.updated", criterion_id=criterion_id, fields=sorted(changes))
            return criteria[index]
        return None

    def delete(self, criterion_id: str) -> bool:
        criteria = self.list()
        remaining = [criterion for criterion in criteria if criterion.id != criterion_id]
        self._persist(remaining)
        removed = len(remaining) != len(criteria)
        if removed:
            self._logger.info("criteria.deleted", criterion_id=criterion_id)
        return removed

    def reorder(self, criteria: Iterable[RatingCriterion | Mapping[str, Any]]) -> None:
        """Replace the stored order wholesale with the given list."""
        ordered = [
            item if isinstance(item, RatingCriterion) else RatingCriterion.model_validate(item)
            for item in criteria
        ]
        self._persist(ordered)
        self._logger.info("criteria.reordered", order=[item.id for item in ordered])

    def _load(self) -> list[dict[str, Any]]:
        # Defaults are served until the first write persists them with it.
        if self._seed_defaults and not self._store.has(self.collection):
            return [criterion.model_dump(mode="json") for criterion in DEFAULT_CRITERIA]
        return self._store.load(self.collection)

    def _persist(self, criteria: list[RatingCriterion]) -> None:
        self._store.save(
            self.collection,
            [criterion.model_dump(mode="json") for criterion in criteria],
        )
