"""Unit tests for the Role ordering."""

import pytest

from hoard.domain.value import InviteToken, Role


class TestRoleOrdering:
    """Role is totally ordered: owner > admin > editor > viewer."""

    def test_ranks_are_strictly_ordered(self):
        ascending = (Role.VIEWER, Role.EDITOR, Role.ADMIN, Role.OWNER)
        ranks = [role.rank for role in ascending]
        assert ranks == sorted(ranks)
        assert len(set(ranks)) == 4

    @pytest.mark.parametrize(
        "role, minimum, expected",
        [
            (Role.OWNER, Role.ADMIN, True),
            (Role.ADMIN, Role.ADMIN, True),
            (Role.EDITOR, Role.ADMIN, False),
            (Role.EDITOR, Role.VIEWER, True),
            (Role.VIEWER, Role.EDITOR, False),
            (Role.ADMIN, Role.OWNER, False),
        ],
    )
    def test_at_least(self, role, minimum, expected):
        assert role.at_least(minimum) is expected

    def test_only_owner_is_not_grantable(self):
        assert not Role.OWNER.is_grantable
        assert Role.ADMIN.is_grantable
        assert Role.EDITOR.is_grantable
        assert Role.VIEWER.is_grantable

    def test_role_values_round_trip_from_strings(self):
        assert Role("editor") is Role.EDITOR


class TestInviteToken:
    """Tests for the InviteToken value object."""

    def test_redacted_keeps_only_prefix(self):
        token = InviteToken(root="abcdefghijklmnop")
        assert token.redacted == "abcdefgh..."

    def test_empty_token_rejected(self):
        with pytest.raises(ValueError):
            InviteToken(root="")

    def test_tokens_compare_by_value(self):
        assert InviteToken(root="same") == InviteToken(root="same")
