from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple
from marsrealestate.schemas.property import MarsProperty
from marsrealestate.services.binding import bind_image
from structlog import get_logger

logger = get_logger()

class DiffCallback:
    """Decides how two grid lists line up.

    Contents are compared by id alone, so a property whose price changed under
    the same id keeps its old binding.
    """

    def are_items_the_same(self, old_item: MarsProperty, new_item: MarsProperty) -> bool:
        return old_item is new_item or old_item.id == new_item.id

    def are_contents_the_same(self, old_item: MarsProperty, new_item: MarsProperty) -> bool:
        return old_item is new_item or old_item.id == new_item.id


@dataclass
class DiffResult:
    removals: List[Tuple[int, MarsProperty]] = field(default_factory=list)
    insertions: List[Tuple[int, MarsProperty]] = field(default_factory=list)
    moves: List[Tuple[int, int, MarsProperty]] = field(default_factory=list)
    changes: List[Tuple[int, MarsProperty]] = field(default_factory=list)
    unchanged: List[Tuple[int, int, MarsProperty]] = field(default_factory=list)
    # new position -> old position for every entity present in both lists
    matches: Dict[int, int] = field(default_factory=dict)

    @property
    def has_updates(self) -> bool:
        return bool(self.removals or self.insertions or self.moves or self.changes)


def _longest_increasing_run(values: List[int]) -> set:
    """Indexes into `values` forming a longest strictly increasing subsequence."""
    tails: List[int] = []
    predecessors: List[Optional[int]] = [None] * len(values)
    for i, value in enumerate(values):
        lo, hi = 0, len(tails)
        while lo < hi:
            mid = (lo + hi) // 2
            if values[tails[mid]] < value:
                lo = mid + 1
            else:
                hi = mid
        predecessors[i] = tails[lo - 1] if lo > 0 else None
        if lo == len(tails):
            tails.append(i)
        else:
            tails[lo] = i
    result = set()
    index = tails[-1] if tails else None
    while index is not None:
        result.add(index)
        index = predecessors[index]
    return result


def calculate_diff(old_list: List[MarsProperty], new_list: List[MarsProperty], callback: DiffCallback) -> DiffResult:
    result = DiffResult()
    old_taken = [False] * len(old_list)

    for new_pos, new_item in enumerate(new_list):
        for old_pos, old_item in enumerate(old_list):
            if not old_taken[old_pos] and callback.are_items_the_same(old_item, new_item):
                old_taken[old_pos] = True
                result.matches[new_pos] = old_pos
                break
        else:
            result.insertions.append((new_pos, new_item))

    result.removals = [(pos, item) for pos, item in enumerate(old_list) if not old_taken[pos]]

    # Entities whose relative order survived stay in place; everything else moved
    matched = sorted(result.matches.items())
    stable = _longest_increasing_run([old_pos for _, old_pos in matched])
    for i, (new_pos, old_pos) in enumerate(matched):
        new_item = new_list[new_pos]
        same_contents = callback.are_contents_the_same(old_list[old_pos], new_item)
        if i not in stable:
            result.moves.append((old_pos, new_pos, new_item))
        elif same_contents:
            result.unchanged.append((old_pos, new_pos, new_item))
        if not same_contents:
            result.changes.append((new_pos, new_item))
    return result


class OnClickListener:
    def __init__(self, click_listener: Callable[[MarsProperty], None]):
        self.click_listener = click_listener

    def on_click(self, mars_property: MarsProperty):
        return self.click_listener(mars_property)


class MarsPropertyViewHolder:
    """One grid cell: the property it shows and its click handler."""

    def __init__(self):
        self.property: Optional[MarsProperty] = None
        self.image_uri: Optional[str] = None
        self.bind_count = 0
        self._on_click: Optional[Callable[[], None]] = None

    def set_on_click_listener(self, listener: Optional[Callable[[], None]]):
        self._on_click = listener

    def click(self):
        if self._on_click is not None:
            self._on_click()

    def bind(self, mars_property: MarsProperty):
        self.property = mars_property
        self.image_uri = bind_image(mars_property.img_src_url)
        self.bind_count += 1

    def unbind(self):
        self.property = None
        self.image_uri = None
        self._on_click = None


class PhotoGridAdapter:
    """Keeps a list of grid cells in step with the submitted property list."""

    def __init__(self, on_click_listener: OnClickListener | Callable[[MarsProperty], None], diff_callback: DiffCallback | None = None):
        if not isinstance(on_click_listener, OnClickListener):
            on_click_listener = OnClickListener(on_click_listener)
        self.on_click_listener = on_click_listener
        self.diff_callback = diff_callback or DiffCallback()
        self._items: List[MarsProperty] = []
        self._view_holders: List[MarsPropertyViewHolder] = []
        self._recycled: List[MarsPropertyViewHolder] = []

    @property
    def current_list(self) -> List[MarsProperty]:
        return list(self._items)

    @property
    def item_count(self) -> int:
        return len(self._items)

    def get_item(self, position: int) -> MarsProperty:
        return self._items[position]

    def view_holder(self, position: int) -> MarsPropertyViewHolder:
        return self._view_holders[position]

    def submit_list(self, new_list: List[MarsProperty] | None) -> DiffResult:
        new_items = list(new_list or [])
        if len(new_items) == len(self._items) and all(a is b for a, b in zip(new_items, self._items)):
            return DiffResult(unchanged=[(i, i, item) for i, item in enumerate(new_items)])

        diff = calculate_diff(self._items, new_items, self.diff_callback)
        holders: List[Optional[MarsPropertyViewHolder]] = [None] * len(new_items)
        for new_pos, old_pos in diff.matches.items():
            holders[new_pos] = self._view_holders[old_pos]
        for old_pos, _ in diff.removals:
            holder = self._view_holders[old_pos]
            holder.unbind()
            self._recycled.append(holder)

        self._items = new_items
        self._view_holders = holders
        for new_pos, _ in diff.insertions:
            self._view_holders[new_pos] = self._create_view_holder()
            self.on_bind_view_holder(self._view_holders[new_pos], new_pos)
        for new_pos, _ in diff.changes:
            self.on_bind_view_holder(self._view_holders[new_pos], new_pos)

        logger.debug(
            "Grid list submitted",
            removed=len(diff.removals),
            inserted=len(diff.insertions),
            moved=len(diff.moves),
            changed=len(diff.changes),
        )
        return diff

    def _create_view_holder(self) -> MarsPropertyViewHolder:
        if self._recycled:
            return self._recycled.pop()
        return MarsPropertyViewHolder()

    def on_bind_view_holder(self, holder: MarsPropertyViewHolder, position: int):
        mars_property = self.get_item(position)
        holder.set_on_click_listener(lambda: self.on_click_listener.on_click(mars_property))
        holder.bind(mars_property)

    def click(self, position: int):
        self._view_holders[position].click()

    def render(self) -> List[dict]:
        return [
            {"position": position, "id": holder.property.id, "image_uri": holder.image_uri}
            for position, holder in enumerate(self._view_holders)
        ]
