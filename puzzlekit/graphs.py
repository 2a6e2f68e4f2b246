"""Graph puzzles: falling apples, the money-collecting robot and an A* trace."""

import heapq
from collections import defaultdict, deque

_EXIT = "E"


def _collide(first, second):
    x1, y1, _, r1 = first
    x2, y2, _, r2 = second
    return (x1 - x2) ** 2 + (y1 - y2) ** 2 < (r1 + r2) ** 2


def remaining_apples(apples, index):
    """Apples left on the tree after the apple at index falls and knocks others."""
    apples = [tuple(apple) for apple in apples]
    if not 0 <= index < len(apples):
        raise ValueError(f"no apple with index {index}")
    order = sorted(
        range(len(apples)),
        key=lambda i: (-apples[i][2], -apples[i][0], -apples[i][1]),
    )
    position = order.index(index)
    falling = [apples[index]]
    for other in order[position + 1:]:
        apple = apples[other]
        if any(_collide(dropped, apple) for dropped in falling):
            falling.append(apple)
    return len(apples) - len(falling)


def _door(value):
    if value is None or (isinstance(value, str) and value.strip().upper() == _EXIT):
        return None
    return int(value)


def blunder_max_money(rooms):
    """Most money collectable on a path from room 0 to an exit."""
    money = {}
    parents = defaultdict(list)
    pending = {}
    for room_id, amount, *doors in rooms:
        room_id = int(room_id)
        money[room_id] = int(amount)
        children = [child for child in map(_door, doors) if child is not None]
        pending[room_id] = len(children)
        for child in children:
            parents[child].append(room_id)

    unknown = set(parents) - set(money)
    if unknown:
        raise ValueError(f"doors lead to unknown rooms: {sorted(unknown)}")
    if 0 not in money:
        raise ValueError("there is no room 0")

    total = dict(money)
    ready = deque(room for room, count in pending.items() if count == 0)
    while ready:
        room = ready.popleft()
        for parent in parents[room]:
            total[parent] = max(total[parent], total[room] + money[parent])
            pending[parent] -= 1
            if pending[parent] == 0:
                ready.append(parent)
    return total[0]


def astar_trace(heuristics, edges, start, end):
    """Nodes in the order A* closes them, each with its f value, up to end."""
    heuristic = list(heuristics)
    count = len(heuristic)
    neighbours = [[] for _ in range(count)]
    for first, second, cost in edges:
        neighbours[first].append((second, cost))
        neighbours[second].append((first, cost))

    travelled = [0] * count
    closed = [False] * count
    open_list = [(heuristic[start], start)]
    trace = []
    while open_list:
        f, node = heapq.heappop(open_list)
        if closed[node]:
            continue
        closed[node] = True
        trace.append((node, f))
        if node == end:
            return trace
        for neighbour, cost in neighbours[node]:
            if closed[neighbour]:
                continue
            candidate = travelled[node] + cost
            heapq.heappush(open_list, (candidate + heuristic[neighbour], neighbour))
            travelled[neighbour] = (
                min(candidate, travelled[neighbour]) if travelled[neighbour] else candidate
            )
    raise ValueError(f"node {end} cannot be reached from {start}")