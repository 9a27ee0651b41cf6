import pytest
from datetime import date
from pydantic import ValidationError

from models import Hole, LieAfter, LieBefore, Round, Shot
from models.round import make_round_id, sanitize_course_name


# ================================================================
# Shot
# ================================================================

def test_shot_parses_lies_into_enums():
    s = Shot(shot=1, lie_before="Tee", dist_before=400, lie_after="Fairway", dist_after=150)
    assert s.lie_before is LieBefore.TEE
    assert s.lie_after is LieAfter.FAIRWAY
    assert s.lie_before == "Tee"          # str enum compares with raw strings


def test_shot_accepts_camel_case_keys():
    s = Shot.model_validate(
        {"shot": 2, "lieBefore": "Rough", "distBefore": 160, "lieAfter": "Green", "distAfter": 7}
    )
    assert s.lie_before is LieBefore.ROUGH
    assert s.dist_before == 160
    assert s.dist_after == 7


def test_shot_empty_lie_is_unset():
    s = Shot(shot=1, lie_before="", lie_after="   ")
    assert s.lie_before is None
    assert s.lie_after is None
    assert s.dist_before == 0 and s.dist_after == 0


def test_shot_rejects_unknown_lie():
    with pytest.raises(ValidationError):
        Shot(shot=1, lie_before="Cart Path")

    with pytest.raises(ValidationError):
        Shot(shot=1, lie_after="Tee")       # Tee is not a finishing lie

    with pytest.raises(ValidationError):
        Shot(shot=1, lie_before="Holed")    # nor Holed a starting one


def test_shot_distance_validation():
    with pytest.raises(ValidationError):
        Shot(shot=1, dist_before=-5)

    with pytest.raises(ValidationError):
        Shot(shot=0)                        # shot numbers are 1-based


def test_holed_shot_must_finish_at_zero():
    with pytest.raises(ValidationError):
        Shot(shot=3, lie_before="Green", dist_before=4, lie_after="Holed", dist_after=2)

    s = Shot(shot=3, lie_before="Green", dist_before=4, lie_after="Holed", dist_after=0)
    assert s.is_holed


def test_shot_flags():
    assert Shot(shot=1, lie_before="Penalty").touches_penalty
    assert Shot(shot=1, lie_after="Penalty").touches_penalty
    assert Shot(shot=1, lie_before="Layup").is_ignored
    assert Shot(shot=1, lie_after="Layup").is_ignored
    assert not Shot(shot=1, lie_before="Fairway", lie_after="Green").is_ignored


def test_shot_is_frozen():
    s = Shot(shot=1, lie_before="Tee")
    with pytest.raises(ValidationError):
        s.dist_before = 300


def test_shot_try_update_reports_errors():
    s = Shot(shot=1, lie_before="Tee", dist_before=400)

    updated, error = s.try_update(dist_after=120)
    assert error is None
    assert updated.dist_after == 120
    assert s.dist_after == 0              # original untouched

    same, error = s.try_update(lie_after="Moon")
    assert same is s
    assert error is not None


# ================================================================
# Hole
# ================================================================

def _shot(n, before, dist_before, after, dist_after):
    return Shot(shot=n, lie_before=before, dist_before=dist_before, lie_after=after, dist_after=dist_after)


def test_hole_validation():
    h = Hole(number=1, par=4)
    assert h.number == 1
    assert h.par == 4
    assert h.shots == []

    with pytest.raises(ValidationError):
        Hole(number=1, par=6)          # par > 5

    with pytest.raises(ValidationError):
        Hole(number=19)                # hole > 18


def test_hole_accepts_hole_key():
    h = Hole.model_validate({"hole": 7, "shots": []})
    assert h.number == 7
    assert h.par is None


def test_hole_rejects_shot_gaps():
    with pytest.raises(ValidationError):
        Hole(number=1, shots=[_shot(1, "Tee", 400, "Fairway", 150), _shot(3, "Fairway", 150, "Green", 5)])

    with pytest.raises(ValidationError):
        Hole(number=1, shots=[_shot(2, "Tee", 400, "Fairway", 150)])


def test_hole_rejects_shots_after_holed():
    with pytest.raises(ValidationError):
        Hole(
            number=1,
            shots=[
                _shot(1, "Green", 3, "Holed", 0),
                _shot(2, "Green", 0, "Holed", 0),
            ],
        )


def test_hole_finished_and_first_green():
    h = Hole(
        number=1,
        par=4,
        shots=[
            _shot(1, "Tee", 400, "Fairway", 150),
            _shot(2, "Fairway", 150, "Green", 8),
            _shot(3, "Green", 8, "Green", 1),
            _shot(4, "Green", 1, "Holed", 0),
        ],
    )
    assert h.is_started
    assert h.is_finished
    assert h.first_green_shot().shot == 2

    empty = Hole(number=2)
    assert not empty.is_started
    assert not empty.is_finished
    assert empty.first_green_shot() is None


def test_add_shot_starts_from_previous_finish():
    h = Hole(number=1, par=4).add_shot()
    assert [s.shot for s in h.shots] == [1]
    assert h.shots[0].lie_before is None
    assert h.shots[0].dist_before == 0

    h = h.update_shot(0, lie_before="Tee", dist_before=410, lie_after="Rough", dist_after=160)
    h = h.add_shot()
    assert h.shots[1].shot == 2
    assert h.shots[1].lie_before is LieBefore.ROUGH
    assert h.shots[1].dist_before == 160
    assert h.shots[1].lie_after is None


def test_add_shot_refuses_finished_hole():
    h = Hole(number=3, par=3, shots=[
        _shot(1, "Tee", 150, "Green", 6),
        _shot(2, "Green", 6, "Holed", 0),
    ])
    with pytest.raises(ValueError, match="Hole 3 is finished"):
        h.add_shot()
    assert len(h.shots) == 2


def test_first_shot():
    assert Hole(number=1).first_shot is None
    h = Hole(number=1, shots=[_shot(1, "Tee", 400, "Fairway", 150), _shot(2, "Fairway", 150, "", 0)])
    assert h.first_shot is h.shots[0]


def test_update_shot_holed_forces_zero_distance():
    h = Hole(number=1, shots=[_shot(1, "Green", 4, "Green", 1)])
    h = h.update_shot(0, lie_after="Holed")
    assert h.shots[0].lie_after is LieAfter.HOLED
    assert h.shots[0].dist_after == 0


def test_update_shot_refills_next_shot():
    h = Hole(
        number=1,
        shots=[
            _shot(1, "Tee", 400, "Fairway", 150),
            _shot(2, "Fairway", 150, "Green", 8),
        ],
    )
    edited = h.update_shot(0, lie_after="Bunker", dist_after=140)

    assert edited.shots[1].lie_before is LieBefore.BUNKER
    assert edited.shots[1].dist_before == 140
    assert edited.shots[1].lie_after is LieAfter.GREEN      # rest of shot 2 kept
    assert h.shots[1].lie_before is LieBefore.FAIRWAY       # original untouched


def test_update_shot_validates_changes():
    h = Hole(number=1, shots=[_shot(1, "Tee", 400, "Fairway", 150)])
    with pytest.raises(ValidationError):
        h.update_shot(0, lie_after="Water")


def test_delete_last_shot_and_par():
    h = Hole(number=1, shots=[_shot(1, "Tee", 400, "Fairway", 150)])
    assert h.delete_last_shot().shots == []
    assert Hole(number=1).delete_last_shot().shots == []

    assert h.with_par(5).par == 5
    assert h.with_par(5).with_par(None).par is None


# ================================================================
# Round
# ================================================================

def test_sanitize_course_name():
    assert sanitize_course_name("  Pebble  Beach GL ") == "Pebble-Beach-GL"
    assert sanitize_course_name("St. Andrews (Old)") == "St-Andrews-Old"
    assert sanitize_course_name("สนามกอล์ฟ 1") == "สนามกอล์ฟ-1"
    assert sanitize_course_name("") == ""


def test_make_round_id_uses_day_of_year():
    assert make_round_id(date(2026, 3, 14), "Riverside") == "20260073-Riverside"
    assert make_round_id(date(2025, 12, 31), "X") == "20250365-X"


def test_new_round_has_18_empty_holes():
    r = Round.new("Royal Links", today=date(2026, 1, 5))
    assert r.course == "Royal-Links"
    assert r.round_id == "20260005-Royal-Links"
    assert r.date == date(2026, 1, 5)
    assert [h.number for h in r.holes] == list(range(1, 19))
    assert all(h.par is None and h.shots == [] for h in r.holes)


def test_new_round_default_course():
    r = Round.new("   ", today=date(2026, 1, 5))
    assert r.course == "MyCourse"
    assert r.round_id == "20260005-MyCourse"


def test_round_holes_are_positional():
    with pytest.raises(ValidationError):
        Round(date=date(2026, 1, 1), course="c", round_id="r", holes=[Hole(number=2)])

    with pytest.raises(ValidationError):
        Round(
            date=date(2026, 1, 1),
            course="c",
            round_id="r",
            holes=[Hole(number=i) for i in range(1, 19)] + [Hole(number=1)],
        )


def test_round_with_hole_returns_new_round():
    r = Round.new("Course", today=date(2026, 1, 5))
    hole = r.get_hole(3).with_par(3).add_shot()
    r2 = r.with_hole(hole)

    assert r2.get_hole(3).par == 3
    assert r2.total_shots() == 1
    assert r.get_hole(3).par is None
    assert r.total_shots() == 0

    assert r.get_hole(0) is None
    assert r.get_hole(19) is None


def test_round_accepts_camel_case_draft_json():
    data = {
        "date": "2026-03-14",
        "course": "Riverside",
        "roundId": "20260073-Riverside",
        "holes": [
            {"hole": 1, "par": 4, "shots": [
                {"shot": 1, "lieBefore": "Tee", "distBefore": 380, "lieAfter": "", "distAfter": 0},
            ]},
        ],
    }
    r = Round.model_validate(data)
    assert r.round_id == "20260073-Riverside"
    assert r.holes[0].shots[0].lie_after is None

    again = Round.model_validate_json(r.model_dump_json())
    assert again == r
