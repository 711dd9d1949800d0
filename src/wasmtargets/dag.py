# dag.py
from __future__ import annotations

from collections import deque
from typing import Dict, Iterable, Iterator, List, Mapping, Set, Tuple

from .errors import CyclicDependency, DuplicateTarget, MissingPrerequisite, UnknownTarget
from .model import Target


def build_dag(targets: List[Target]) -> Tuple[Dict[str, Set[str]], Dict[str, int]]:
    """
    Build the prerequisite graph from Target objects.

    Requires:
      - target.name: str (unique)
      - target.needs: iterable[str] (names of targets that must run BEFORE it)
    """
    names = [t.name for t in targets]
    seen: Set[str] = set()
    for n in names:
        if n in seen:
            raise DuplicateTarget(n)
        seen.add(n)

    adj: Dict[str, Set[str]] = {n: set() for n in names}
    indeg: Dict[str, int] = {n: 0 for n in names}

    for target in targets:
        for need in target.needs:
            if need not in seen:
                raise MissingPrerequisite(target=target.name, missing=need)
            # Edge need -> target.name (need must run before target)
            if target.name not in adj[need]:
                adj[need].add(target.name)
                indeg[target.name] += 1

    return adj, indeg


def check_acyclic(adj: Dict[str, Set[str]], indeg: Dict[str, int]) -> None:
    """Kahn's walk over the graph; anything left unprocessed sits on a cycle."""
    indeg = dict(indeg)  # copy (we mutate it)
    q = deque(sorted(n for n, d in indeg.items() if d == 0))
    processed = 0

    while q:
        node = q.popleft()
        processed += 1
        for child in sorted(adj.get(node, set())):
            indeg[child] -= 1
            if indeg[child] == 0:
                q.append(child)

    if processed != len(indeg):
        stuck = {n for n, d in indeg.items() if d > 0}
        raise CyclicDependency(path=_find_cycle(adj, stuck))


def _find_cycle(adj: Dict[str, Set[str]], stuck: Set[str]) -> List[str]:
    """
    Every stuck node still has a stuck prerequisite, so following
    prerequisites from any of them must come back around.
    """
    needs: Dict[str, List[str]] = {n: [] for n in stuck}
    for need, dependents in adj.items():
        if need in stuck:
            for dependent in dependents:
                if dependent in stuck:
                    needs[dependent].append(need)

    walk: List[str] = []
    node = min(stuck)
    while node not in walk:
        walk.append(node)
        node = sorted(needs[node])[0]

    return walk[walk.index(node):] + [node]


def plan(targets: Mapping[str, Target], name: str) -> List[str]:
    """
    Return the execution order for `name`: prerequisites first (post-order,
    declared order), each target once, `name` last.
    """
    if name not in targets:
        raise UnknownTarget(name=name, known=list(targets))

    order: List[str] = []
    done: Set[str] = set()
    active: List[str] = []

    def visit(current: str) -> None:
        if current in done:
            return
        if current in active:
            raise CyclicDependency(path=active[active.index(current):] + [current])
        if current not in targets:
            raise MissingPrerequisite(target=active[-1], missing=current)

        active.append(current)
        for need in targets[current].needs:
            visit(need)
        active.pop()

        done.add(current)
        order.append(current)

    visit(name)
    return order


class TargetTable(Mapping[str, Target]):
    """
    Immutable, validated mapping of target name -> Target.

    The first declared target is the default one.
    """

    def __init__(self, targets: Iterable[Target]):
        targets = list(targets)
        if not targets:
            raise ValueError("A target table needs at least one target")

        adj, indeg = build_dag(targets)
        check_acyclic(adj, indeg)

        self._targets: Dict[str, Target] = {t.name: t for t in targets}
        self._default = targets[0].name

    @property
    def default(self) -> str:
        return self._default

    def plan(self, name: str | None = None) -> List[str]:
        return plan(self._targets, self._default if name is None else name)

    def __getitem__(self, name: str) -> Target:
        return self._targets[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._targets)

    def __len__(self) -> int:
        return len(self._targets)

    def __repr__(self) -> str:
        return f"TargetTable(default={self._default!r}, targets={list(self._targets)})"
