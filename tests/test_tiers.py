import itertools

import pytest
from kinship_py.graph import compute_adjacency
from kinship_py.models import KINDS
from kinship_py.sample import SAMPLE_GRAPH, SAMPLE_NAMES
from kinship_py.tiers import calculate_tier, calculate_relationship, tier_for_label, build_tree_nodes


@pytest.mark.parametrize("kind", ["parent", "child", "sibling", "spouse", "grandparent", "grandchild"])
def test_superior_kinds(kind):
    assert calculate_tier(9, kind) == "SUPERIOR"


@pytest.mark.parametrize("kind", ["aunt_uncle", "niece_nephew", "cousin"])
def test_intermediate_threshold(kind):
    assert calculate_tier(3, kind) == "INTERMEDIATE"
    assert calculate_tier(4, kind) == "DISTANT"


def test_tier_is_total_over_kinds():
    for kind, steps in itertools.product(KINDS, range(0, 8)):
        assert calculate_tier(steps, kind) in ("SUPERIOR", "INTERMEDIATE", "DISTANT")
    assert calculate_tier(0, "self") == "DISTANT"


@pytest.mark.parametrize(
    "text,tier",
    [
        ("Mother", "SUPERIOR"),
        ("Grandmother (Paternal)", "SUPERIOR"),
        ("Uncle (Father's Brother)", "SUPERIOR"),
        ("Aunt (M)", "INTERMEDIATE"),
        ("Cousin", "INTERMEDIATE"),
        ("Other", "DISTANT"),
    ],
)
def test_tier_for_label(text, tier):
    assert tier_for_label(text) == tier


def test_me_to_mother():
    r = calculate_relationship(SAMPLE_GRAPH, "me", "mother")
    assert (r.kind, r.label, r.steps_away, r.tier) == ("parent", "Your Parent", 1, "SUPERIOR")
    assert r.path.nodes == ("me", "mother")


def test_me_to_spouse():
    r = calculate_relationship(SAMPLE_GRAPH, "me", "spouse")
    assert (r.kind, r.label, r.steps_away, r.in_law, r.tier) == ("spouse", "Your Spouse", 0, True, "SUPERIOR")


def test_first_cousin_lands_in_distant_tier():
    # parent + sibling + child folds to 4 steps, over the intermediate threshold
    r = calculate_relationship(SAMPLE_GRAPH, "me", "cousin1")
    assert r.kind == "cousin"
    assert r.label == "Your First Cousin"
    assert r.steps_away == 4
    assert (r.degree, r.removed) == (1, 0)
    assert r.tier == "DISTANT"


def test_me_to_aunt():
    r = calculate_relationship(SAMPLE_GRAPH, "me", "aunt_m")
    assert (r.kind, r.label, r.steps_away, r.tier) == ("aunt_uncle", "Your Aunt/Uncle", 3, "INTERMEDIATE")


def test_spouse_side_labels():
    r = calculate_relationship(SAMPLE_GRAPH, "spouse", "mother")
    assert r.label == "Your Parent-in-law"
    assert r.tier == "SUPERIOR"
    r = calculate_relationship(SAMPLE_GRAPH, "spouse", "aunt_m")
    assert r.label == "Your Aunt/Uncle (In-Law)"
    assert r.tier == "INTERMEDIATE"


def test_aunt_sees_niece_nephew():
    r = calculate_relationship(SAMPLE_GRAPH, "aunt_m", "me")
    assert r.kind == "niece_nephew"
    assert r.steps_away == 3


def test_unreachable_is_none():
    assert calculate_relationship(SAMPLE_GRAPH, "me", "second_cousin") is None
    assert calculate_relationship(SAMPLE_GRAPH, "me", "unknown_id") is None


def test_idempotent():
    a = calculate_relationship(SAMPLE_GRAPH, "me", "cousin2")
    b = calculate_relationship(SAMPLE_GRAPH, "me", "cousin2")
    assert a == b


def test_steps_away_symmetric():
    people = [n for n in SAMPLE_GRAPH.nodes if n != "second_cousin"]
    adj = compute_adjacency(SAMPLE_GRAPH)
    for a, b in itertools.combinations(people, 2):
        ab = calculate_relationship(SAMPLE_GRAPH, a, b, adjacency=adj)
        ba = calculate_relationship(SAMPLE_GRAPH, b, a, adjacency=adj)
        assert ab.steps_away == ba.steps_away, (a, b)


def test_build_tree_nodes():
    nodes = {n.id: n for n in build_tree_nodes(SAMPLE_GRAPH, "me", names=SAMPLE_NAMES)}
    assert nodes["me"].tier == "CENTER"
    assert nodes["me"].name == "You"
    assert nodes["mother"].tier == "SUPERIOR"
    assert nodes["aunt_m"].tier == "INTERMEDIATE"
    assert nodes["cousin1"].tier == "DISTANT"
    assert "second_cousin" not in nodes
