"""Incremental edit scripts between published sequences.

Identity is the record's stable_id; content equality is full record equality.
The longest run of records that keep their relative order is found with
Myers' O(ND) difference algorithm; everything else becomes a removal, an
insertion or, when move detection is on, a move. Operations are emitted so
that applying them one after another to the old list yields the new one:

1. removals, highest position first
2. moves, each to the slot after its nearest already-placed predecessor
3. insertions, lowest position first
4. in-place content changes at final positions
"""

from collections.abc import Hashable, Sequence

from ..config.settings import DifferSettings
from ..models.results import ResultRecord
from ..models.updates import EditOperation, EditScript, EditType
from ..utils.errors import EditScriptError
from ..utils.logging import get_logger

logger = get_logger(__name__)


def _common_subsequence(
    old_keys: Sequence[Hashable], new_keys: Sequence[Hashable]
) -> list[tuple[int, int]]:
    """Return matched (old_index, new_index) pairs of a longest common subsequence."""
    n, m = len(old_keys), len(new_keys)
    if not set(old_keys).intersection(new_keys):
        return []

    max_d = n + m
    offset = max_d
    v = [0] * (2 * max_d + 2)
    trace: list[list[int]] = []

    final_d = 0
    for d in range(max_d + 1):
        # Backtracking through round d only reads diagonals -d..d
        trace.append(v[offset - d : offset + d + 1])
        done = False
        for k in range(-d, d + 1, 2):
            if k == -d or (k != d and v[offset + k - 1] < v[offset + k + 1]):
                x = v[offset + k + 1]
            else:
                x = v[offset + k - 1] + 1
            y = x - k
            while x < n and y < m and old_keys[x] == new_keys[y]:
                x += 1
                y += 1
            v[offset + k] = x
            if x >= n and y >= m:
                done = True
                break
        if done:
            final_d = d
            break

    # Walk the trace backwards collecting diagonal moves
    pairs: list[tuple[int, int]] = []
    x, y = n, m
    for d in range(final_d, 0, -1):
        snapshot = trace[d]
        k = x - y
        if k == -d or (k != d and snapshot[k - 1 + d] < snapshot[k + 1 + d]):
            prev_k = k + 1
        else:
            prev_k = k - 1
        prev_x = snapshot[prev_k + d]
        prev_y = prev_x - prev_k
        while x > prev_x and y > prev_y:
            x -= 1
            y -= 1
            pairs.append((x, y))
        x, y = prev_x, prev_y

    # Leading snake from the origin
    while x > 0 and y > 0:
        x -= 1
        y -= 1
        pairs.append((x, y))

    pairs.reverse()
    return pairs


def _runs(indices: Sequence[int]) -> list[tuple[int, int]]:
    """Group sorted indices into (start, count) runs of consecutive values."""
    runs: list[tuple[int, int]] = []
    for index in indices:
        if runs and runs[-1][0] + runs[-1][1] == index:
            runs[-1] = (runs[-1][0], runs[-1][1] + 1)
        else:
            runs.append((index, 1))
    return runs


class SequenceDiffer:
    """Computes edit scripts between an old and a new result sequence."""

    def __init__(self, config: DifferSettings | None = None):
        self.config = config or DifferSettings()

    def diff(
        self,
        old: Sequence[ResultRecord],
        new: Sequence[ResultRecord],
        detect_moves: bool = False,
    ) -> EditScript:
        """
        Compute the operations that turn old into new.

        Args:
            old: Currently published sequence
            new: Sequence about to be published
            detect_moves: Pair removed and inserted records with the same id
                into moves instead of a removal plus an insertion

        Returns:
            The edit script
        """
        old = list(old)
        new = list(new)

        matches = _common_subsequence(
            [r.stable_id for r in old], [r.stable_id for r in new]
        )
        destinations: list[int | None] = [None] * len(old)
        for i, j in matches:
            destinations[i] = j
        matched_new = {j for _, j in matches}

        removed = [i for i in range(len(old)) if destinations[i] is None]
        inserted = [j for j in range(len(new)) if j not in matched_new]

        moves: dict[int, int] = {}
        if detect_moves and removed and inserted:
            waiting: dict[int, list[int]] = {}
            for j in inserted:
                waiting.setdefault(new[j].stable_id, []).append(j)
            for i in removed:
                candidates = waiting.get(old[i].stable_id)
                if candidates:
                    moves[i] = candidates.pop(0)
            if moves:
                removed = [i for i in removed if i not in moves]
                targets = set(moves.values())
                inserted = [j for j in inserted if j not in targets]
                for i, j in moves.items():
                    destinations[i] = j

        operations: list[EditOperation] = []

        for start, count in reversed(_runs(removed)):
            operations.append(
                EditOperation(type=EditType.REMOVE, position=start, count=count)
            )
        working = [dest for dest in destinations if dest is not None]

        placed = set(matched_new)
        for target in sorted(moves.values()):
            source = working.index(target)
            working.pop(source)
            destination = 0
            for position, dest in enumerate(working):
                if dest in placed and dest < target:
                    destination = position + 1
            working.insert(destination, target)
            placed.add(target)
            if destination != source:
                operations.append(
                    EditOperation(
                        type=EditType.MOVE, position=source, to_position=destination
                    )
                )

        for start, count in _runs(inserted):
            operations.append(
                EditOperation(
                    type=EditType.INSERT,
                    position=start,
                    count=count,
                    items=new[start : start + count],
                )
            )

        if self.config.detect_content_changes:
            changed = sorted(
                j
                for i, j in enumerate(destinations)
                if j is not None and old[i] != new[j]
            )
            for start, count in _runs(changed):
                operations.append(
                    EditOperation(
                        type=EditType.CHANGE,
                        position=start,
                        count=count,
                        items=new[start : start + count],
                    )
                )

        script = EditScript(
            operations=operations, old_size=len(old), new_size=len(new)
        )
        logger.debug(
            f"Diff {len(old)} -> {len(new)}: {len(matches)} kept, "
            f"{len(moves)} moved, {len(operations)} operations"
        )
        return script


def apply_edit_script(
    old: Sequence[ResultRecord], script: EditScript
) -> list[ResultRecord]:
    """
    Apply an edit script to a copy of a sequence.

    Args:
        old: The sequence the script was computed from
        script: Operations to apply in order

    Returns:
        The transformed sequence

    Raises:
        EditScriptError: If an operation does not fit the list
    """
    items = list(old)
    if len(items) != script.old_size:
        raise EditScriptError(
            f"Script expects {script.old_size} items, got {len(items)}",
            size=len(items),
        )

    for op in script.operations:
        size = len(items)
        if op.type == EditType.REMOVE:
            if op.position + op.count > size:
                raise EditScriptError("Removal out of range", operation=op, size=size)
            del items[op.position : op.position + op.count]
        elif op.type == EditType.INSERT:
            if op.position > size or len(op.items) != op.count:
                raise EditScriptError("Invalid insertion", operation=op, size=size)
            items[op.position : op.position] = op.items
        elif op.type == EditType.MOVE:
            if (
                op.to_position is None
                or op.position >= size
                or op.to_position >= size
            ):
                raise EditScriptError("Invalid move", operation=op, size=size)
            items.insert(op.to_position, items.pop(op.position))
        elif op.type == EditType.CHANGE:
            if op.position + op.count > size or len(op.items) != op.count:
                raise EditScriptError("Invalid change", operation=op, size=size)
            items[op.position : op.position + op.count] = op.items

    if len(items) != script.new_size:
        raise EditScriptError(
            f"Script produced {len(items)} items, expected {script.new_size}",
            size=len(items),
        )
    return items
