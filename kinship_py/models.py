from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import List, Optional, Dict, Any, Union

# one-hop relation kinds, as seen from the node being left
PARENT = "parent"
CHILD = "child"
SIBLING = "sibling"
SPOUSE = "spouse"

# tiers
CENTER = "CENTER"
SUPERIOR = "SUPERIOR"
INTERMEDIATE = "INTERMEDIATE"
DISTANT = "DISTANT"

KINDS = (
    "self",
    "parent",
    "child",
    "sibling",
    "spouse",
    "grandparent",
    "grandchild",
    "aunt_uncle",
    "niece_nephew",
    "cousin",
)


@dataclass(frozen=True)
class ParentChild:
    parent: str
    child: str
    kind: str = field(default="parent_child", init=False)

    def __post_init__(self):
        if self.parent == self.child:
            raise ValueError(f"parent_child edge cannot loop on {self.parent!r}")

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "parent": self.parent, "child": self.child}


@dataclass(frozen=True)
class Sibling:
    a: str
    b: str
    kind: str = field(default="sibling", init=False)

    def __post_init__(self):
        if self.a == self.b:
            raise ValueError(f"sibling edge cannot loop on {self.a!r}")

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "a": self.a, "b": self.b}


@dataclass(frozen=True)
class Spouse:
    a: str
    b: str
    kind: str = field(default="spouse", init=False)

    def __post_init__(self):
        if self.a == self.b:
            raise ValueError(f"spouse edge cannot loop on {self.a!r}")

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "a": self.a, "b": self.b}


RelationshipEdge = Union[ParentChild, Sibling, Spouse]


def edge_from_dict(d: Dict[str, Any]) -> RelationshipEdge:
    """Build an edge from its dict form, dispatching on the ``kind`` key."""
    kind = d.get("kind")
    if kind == "parent_child":
        return ParentChild(parent=d["parent"], child=d["child"])
    if kind == "sibling":
        return Sibling(a=d["a"], b=d["b"])
    if kind == "spouse":
        return Spouse(a=d["a"], b=d["b"])
    raise ValueError(f"unknown edge kind: {kind!r}")


@dataclass(frozen=True)
class FamilyGraph:
    nodes: tuple = ()
    edges: tuple = ()

    def __post_init__(self):
        # accept lists from callers, store tuples so the graph stays immutable
        object.__setattr__(self, "nodes", tuple(self.nodes))
        object.__setattr__(self, "edges", tuple(self.edges))

    def to_dict(self) -> Dict[str, Any]:
        return {"nodes": list(self.nodes), "edges": [e.to_dict() for e in self.edges]}

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "FamilyGraph":
        return FamilyGraph(
            nodes=d.get("nodes", []),
            edges=[edge_from_dict(e) for e in d.get("edges", [])],
        )


@dataclass(frozen=True)
class GraphPath:
    nodes: tuple
    edges: tuple

    def __post_init__(self):
        object.__setattr__(self, "nodes", tuple(self.nodes))
        object.__setattr__(self, "edges", tuple(self.edges))

    @property
    def steps(self) -> int:
        return len(self.edges)

    def to_dict(self) -> Dict[str, Any]:
        return {"nodes": list(self.nodes), "edges": list(self.edges)}


@dataclass(frozen=True)
class AnalyzedRelationship:
    kind: str
    label: str
    steps_away: int
    in_law: bool = False
    # cousin kind only
    degree: Optional[int] = None
    removed: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class CalculatedRelationship(AnalyzedRelationship):
    tier: str = DISTANT
    path: Optional[GraphPath] = None

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["path"] = self.path.to_dict() if self.path else None
        return d


@dataclass(frozen=True)
class TreeNode:
    id: str
    name: str = ""
    tier: str = DISTANT

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "TreeNode":
        return TreeNode(id=d["id"], name=d.get("name", ""), tier=d.get("tier", DISTANT))


@dataclass(frozen=True)
class TreeLink:
    source: str
    target: str
    # rendering hint only, never affects placement
    verified: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "TreeLink":
        return TreeLink(source=d["source"], target=d["target"], verified=bool(d.get("verified", False)))


@dataclass(frozen=True)
class Position:
    x: float
    y: float
    ring: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
