"""Team Aggregate: identifier and name validation, team construction.

Tests:
    - TeamId / ParticipantId accept RFC 4122 UUIDs (v1-5), reject everything else
    - TeamName rules checked in order: empty, too long, not lowercase a-z
    - create_team generates a valid id; reconstruct_team re-validates
"""

import uuid

import pytest

from team_balancer.core.errors import ValidationError
from team_balancer.core.team import (
    Team, create_team, generate_team_id, participant_id,
    reconstruct_team, team_id, team_name,
)

VALID_ID = "a1b2c3d4-e5f6-4a7b-ac9d-0e1f2a3b4c5d"


def test_team_id_accepts_v4_uuid():
    assert team_id(VALID_ID) == VALID_ID


def test_team_id_accepts_uppercase_hex():
    assert team_id(VALID_ID.upper()) == VALID_ID.upper()


def test_team_id_accepts_v1_uuid():
    value = str(uuid.uuid1())
    assert team_id(value) == value


@pytest.mark.parametrize("value", [
    "",
    "not-a-uuid",
    "a1b2c3d4e5f64a7bac9d0e1f2a3b4c5d",
    "a1b2c3d4-e5f6-6a7b-ac9d-0e1f2a3b4c5d",
    "a1b2c3d4-e5f6-4a7b-cc9d-0e1f2a3b4c5d",
    "00000000-0000-0000-0000-000000000000",
])
def test_team_id_rejects_malformed(value):
    with pytest.raises(ValidationError) as exc:
        team_id(value)
    assert exc.value.code == "INVALID_TEAM_ID_FORMAT"
    assert exc.value.http_status == 400


def test_team_id_rejects_non_string():
    with pytest.raises(ValidationError):
        team_id(None)


def test_participant_id_uses_its_own_code():
    assert participant_id(VALID_ID) == VALID_ID
    with pytest.raises(ValidationError) as exc:
        participant_id("bogus")
    assert exc.value.code == "INVALID_PARTICIPANT_ID_FORMAT"
    assert exc.value.field == "ParticipantId"


def test_team_name_accepts_single_lowercase_letter():
    assert team_name("a") == "a"
    assert team_name("z") == "z"


@pytest.mark.parametrize("value,code", [
    ("", "TEAM_NAME_EMPTY"),
    ("ab", "TEAM_NAME_TOO_LONG"),
    ("AB", "TEAM_NAME_TOO_LONG"),
    ("A", "TEAM_NAME_NOT_LOWERCASE_ALPHABETIC"),
    ("1", "TEAM_NAME_NOT_LOWERCASE_ALPHABETIC"),
    ("é", "TEAM_NAME_NOT_LOWERCASE_ALPHABETIC"),
])
def test_team_name_rejections(value, code):
    with pytest.raises(ValidationError) as exc:
        team_name(value)
    assert exc.value.code == code


def test_generate_team_id_is_valid_uuid():
    assert team_id(generate_team_id())


def test_generate_team_id_is_unique():
    assert generate_team_id() != generate_team_id()


def test_create_team_assigns_fresh_id():
    team = create_team("c")
    assert team.name == "c"
    assert team_id(team.id) == team.id


def test_create_team_rejects_bad_name():
    with pytest.raises(ValidationError):
        create_team("cc")


def test_team_is_immutable():
    team = create_team("a")
    with pytest.raises(AttributeError):
        team.name = "b"


def test_reconstruct_team_round_trips_persisted_values():
    assert reconstruct_team(VALID_ID, "b") == Team(id=VALID_ID, name="b")


def test_reconstruct_team_fails_loudly_on_corrupt_row():
    with pytest.raises(ValidationError) as exc:
        reconstruct_team("corrupt", "b")
    assert exc.value.code == "INVALID_TEAM_ID_FORMAT"
