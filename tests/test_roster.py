import pytest
from dinobattle.battle.creature import Creature
from dinobattle.battle.factory import random_roster, roster_from_species
from dinobattle.battle.roster import Roster, TEAM_CAP
from dinobattle.battle.species import Species
from dinobattle.core.errors import RosterCapacityError, UnknownSpeciesError


def species_of(roster: Roster):
    return [c.species for c in roster]


def test_capacity_enforced_at_construction():
    with pytest.raises(RosterCapacityError):
        roster_from_species([Species.PTERANODON] * (TEAM_CAP + 1))
    assert len(roster_from_species([Species.PTERANODON] * TEAM_CAP)) == TEAM_CAP


def test_dead_creatures_dropped_on_construction():
    dead = Creature(species=Species.VELOCIRAPTOR, health=0, attack=4, defense=0)
    r = Roster.of([dead, Creature.from_species(Species.BRACHIOSAURUS)])
    assert species_of(r) == [Species.BRACHIOSAURUS]


def test_damage_drops_dead_and_keeps_order():
    r = roster_from_species(["Velociraptor", "Brachiosaurus", "Pteranodon", "Triceratops"])
    out = r.apply_damage([3, 1, 1, 1, 0, 0, 0, 0])
    assert species_of(out) == [Species.BRACHIOSAURUS, Species.TRICERATOPS]
    assert [c.health for c in out] == [6, 3]
    # input untouched
    assert len(r) == 4


def test_damage_vector_indexed_by_live_position():
    r = roster_from_species(["Brachiosaurus", "Brachiosaurus"])
    r = r.apply_damage([7, 0])
    assert len(r) == 1
    # the survivor now sits in slot 0 and takes slot 0's damage
    r = r.apply_damage([2, 5])
    assert [c.health for c in r] == [5]


def test_zero_damage_entries_do_not_hit():
    r = roster_from_species(["Tyrannosaurus", "Pteranodon"])
    out = r.apply_damage([5, 0, 0, 0, 0, 0, 0, 0])
    assert species_of(out) == [Species.PTERANODON]
    assert out.first_live().health == 1


def test_infight_hits_only_matching_species():
    r = roster_from_species(["Tyrannosaurus", "Velociraptor", "Tyrannosaurus"])
    out = r.apply_infight(2, Species.TYRANNOSAURUS)
    assert [c.health for c in out] == [3, 2, 3]
    assert species_of(out) == species_of(r)


def test_infight_can_kill():
    r = roster_from_species(["Velociraptor", "Brachiosaurus", "Velociraptor"])
    out = r.apply_infight(2, Species.VELOCIRAPTOR)
    assert species_of(out) == [Species.BRACHIOSAURUS]


def test_zero_infight_is_noop():
    r = roster_from_species(["Triceratops", "Triceratops"])
    assert r.apply_infight(0, Species.TRICERATOPS) == r


def test_heal_never_removes():
    r = roster_from_species(["Pteranodon", "Brachiosaurus", "Velociraptor"])
    out = r.apply_heal([0, 1, 1, 1, 1, 1, 1, 1])
    assert [c.health for c in out] == [1, 8, 3]


def test_short_vector_rejected():
    r = roster_from_species(["Pteranodon", "Brachiosaurus"])
    with pytest.raises(ValueError):
        r.apply_damage([1])
    with pytest.raises(ValueError):
        r.apply_heal([0])


def test_liveness_queries():
    empty = Roster()
    assert empty.is_dead()
    assert empty.first_live() is None
    r = roster_from_species(["Triceratops", "Pteranodon"])
    assert not r.is_dead()
    assert r.first_live().species is Species.TRICERATOPS
    assert r.total_health() == 5
    assert str(r) == "[Triceratops (4), Pteranodon (1)]"


def test_random_roster_is_seeded():
    import random
    a = random_roster(random.Random(42))
    b = random_roster(random.Random(42))
    assert a == b
    assert len(a) == TEAM_CAP
    assert len(random_roster(random.Random(1), size=3)) == 3
    assert random_roster(random.Random(1), size=0).is_dead()
    with pytest.raises(RosterCapacityError):
        random_roster(random.Random(1), size=TEAM_CAP + 1)


def test_roster_from_unknown_name():
    with pytest.raises(UnknownSpeciesError):
        roster_from_species(["Velociraptor", "Mosasaurus"])
