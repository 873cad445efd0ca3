"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from hoard.domain.model import Chest, Invite, Item, Permission, User
from hoard.domain.value import (
    ChestId,
    InviteId,
    InviteToken,
    ItemId,
    ItemType,
    PermissionId,
    Role,
    UserId,
)


def _uuid(value: Any) -> UUID:
    """Normalize a UUID column value (drivers may hand back strings)."""
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        email=row["email"],
        name=row.get("name"),
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_chest(row: Dict[str, Any]) -> Chest:
    """Convert database row to Chest domain model.

    Args:
        row: Database row as dict

    Returns:
        Chest domain model
    """
    return Chest(
        id=ChestId(_uuid(row["id"])),
        name=row["name"],
        owner_id=UserId(_uuid(row["owner_id"])),
        description=row.get("description"),
        created_at=row["created_at"],
    )


def chest_to_dict(chest: Chest) -> Dict[str, Any]:
    """Convert Chest domain model to database dict."""
    return chest.model_dump()


def row_to_permission(row: Dict[str, Any]) -> Permission:
    """Convert database row to Permission domain model.

    Args:
        row: Database row as dict

    Returns:
        Permission domain model
    """
    return Permission(
        id=PermissionId(_uuid(row["id"])),
        chest_id=ChestId(_uuid(row["chest_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        role=Role(row["role"]),
        created_at=row["created_at"],
    )


def permission_to_dict(permission: Permission) -> Dict[str, Any]:
    """Convert Permission domain model to database dict."""
    data = permission.model_dump()
    data["role"] = permission.role.value
    return data


def row_to_invite(row: Dict[str, Any]) -> Invite:
    """Convert database row to Invite domain model.

    Args:
        row: Database row as dict

    Returns:
        Invite domain model
    """
    return Invite(
        id=InviteId(_uuid(row["id"])),
        chest_id=ChestId(_uuid(row["chest_id"])),
        email=row["email"],
        role=Role(row["role"]),
        invited_by=UserId(_uuid(row["invited_by"])),
        token=InviteToken(root=row["token"]),
        expires_at=row["expires_at"],
        created_at=row["created_at"],
    )


def invite_to_dict(invite: Invite) -> Dict[str, Any]:
    """Convert Invite domain model to database dict.

    The token value object dumps to its plain string.
    """
    data = invite.model_dump()
    data["role"] = invite.role.value
    return data


def row_to_item(row: Dict[str, Any]) -> Item:
    """Convert database row to Item domain model.

    Args:
        row: Database row as dict

    Returns:
        Item domain model
    """
    return Item(
        id=ItemId(_uuid(row["id"])),
        chest_id=ChestId(_uuid(row["chest_id"])),
        type=ItemType(row["type"]),
        created_by=UserId(_uuid(row["created_by"])),
        stack_size=row["stack_size"],
        tags=list(row.get("tags") or []),
        date_time=row.get("date_time"),
        created_at=row["created_at"],
        url=row.get("url"),
        title=row.get("title"),
        content=row.get("content"),
        label=row.get("label"),
        completed=row.get("completed"),
        storage_id=row.get("storage_id"),
        filename=row.get("filename"),
        mime_type=row.get("mime_type"),
        file_size=row.get("file_size"),
    )


def item_to_dict(item: Item) -> Dict[str, Any]:
    """Convert Item domain model to database dict."""
    data = item.model_dump()
    data["type"] = item.type.value
    return data
