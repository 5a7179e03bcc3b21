import pytest

from src.staff_attendance.staff_attendance.common.payload import normalize_keys
from src.staff_attendance.staff_attendance.core.exceptions import ValidationError


def test_camel_case_keys_map_to_snake_case():
    data = normalize_keys({"jobTimeFrom": "09:00", "totalLeaves": 2, "imageUrl": "x.png", "name": "A"})

    assert data == {"job_time_from": "09:00", "total_leaves": 2, "image_url": "x.png", "name": "A"}


def test_area_is_an_alias_of_place_and_canonical_name_wins():
    assert normalize_keys({"area": "North"}) == {"place": "North"}
    assert normalize_keys({"area": "North", "place": "South"}) == {"place": "South"}
    assert normalize_keys({"place": "South", "area": "North"}) == {"place": "South"}


def test_values_are_left_untouched():
    data = normalize_keys({"employeeId": "E1", "status": "FH", "note": "doctor"})

    assert data == {"employee_id": "E1", "status": "FH", "notes": "doctor"}
    assert normalize_keys(None) == {}


@pytest.mark.parametrize("body", [["x"], "salary", 42])
def test_non_object_body_is_rejected(body):
    with pytest.raises(ValidationError) as exc:
        normalize_keys(body)

    assert exc.value.reason == "invalid_body"
