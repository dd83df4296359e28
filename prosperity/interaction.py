"""
Interaction state and its transitions.

Every handler takes the current snapshot and returns a new one; nothing is
mutated in place, so the chart can always be rebuilt from
(dataset, scales, state).
"""
from dataclasses import dataclass, replace
from typing import FrozenSet, Iterable, Optional, Tuple

from .entities import Dataset
from .scales import ScaleSet
from .tooltips import Tooltip, build_tooltips


@dataclass(frozen=True)
class InteractionState:
    highlighted: Optional[str] = None
    visible: FrozenSet[str] = frozenset()
    tooltips: Tuple[Tooltip, ...] = ()

    def is_visible(self, entity: str) -> bool:
        return entity in self.visible


def initial_state(dataset: Dataset) -> InteractionState:
    return InteractionState(visible=frozenset(dataset.entities))


def hover(state: InteractionState, entity: str, dataset: Dataset, scales: ScaleSet) -> InteractionState:
    """Highlight an entity and annotate every one of its records."""
    return replace(state, highlighted=entity, tooltips=build_tooltips(dataset, scales, entity))


def hover_leave(state: InteractionState) -> InteractionState:
    return replace(state, highlighted=None, tooltips=())


def toggle(state: InteractionState, entity: str) -> InteractionState:
    return replace(state, visible=state.visible ^ {entity})


def show_all(state: InteractionState, entities: Iterable[str]) -> InteractionState:
    return replace(state, visible=frozenset(entities))


def hide_all(state: InteractionState) -> InteractionState:
    return replace(state, visible=frozenset())
