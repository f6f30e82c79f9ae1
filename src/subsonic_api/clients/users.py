"""User management endpoints."""

from typing import TYPE_CHECKING, Dict, Optional, Sequence

from ..envelope import Envelope
from ..responses.system import EmptyResponse
from ..responses.users import User, UserResponse, UsersResponse
from ..schema import wire_names

if TYPE_CHECKING:
    from ..client import SubsonicClient

# Role flags accepted by createUser/updateUser (snake_case keyword -> wire name)
ROLE_PARAMETERS: Dict[str, str] = {
    name: wire
    for name, wire in wire_names(User).items()
    if name.endswith("_role")
}


class UserClient:
    """User accounts (most calls require the admin role).

    Roles are passed as keyword arguments named like the ``User`` record
    fields:

        >>> client.users.create_user("bob", "secret", "bob@example.com",
        ...                          admin_role=False, jukebox_role=True)
    """

    def __init__(self, client: "SubsonicClient"):
        self._client = client

    def get_user(self, username: str) -> Envelope[UserResponse]:
        return self._client.execute("getUser", UserResponse, username=username)

    def get_users(self) -> Envelope[UsersResponse]:
        return self._client.execute("getUsers", UsersResponse)

    @staticmethod
    def _role_params(roles: Dict[str, Optional[bool]]) -> Dict[str, Optional[bool]]:
        unknown = set(roles) - set(ROLE_PARAMETERS)
        if unknown:
            raise TypeError(f"Unknown role argument(s): {', '.join(sorted(unknown))}")
        return {ROLE_PARAMETERS[name]: value for name, value in roles.items()}

    def create_user(
        self,
        username: str,
        password: str,
        email: str,
        music_folder_ids: Optional[Sequence[str]] = None,
        **roles: Optional[bool],
    ) -> Envelope[EmptyResponse]:
        """Create a user.

        Raises:
            TypeError: For an unknown role keyword
        """
        return self._client.execute(
            "createUser",
            EmptyResponse,
            username=username,
            password=password,
            email=email,
            musicFolderId=list(music_folder_ids) if music_folder_ids else None,
            **self._role_params(roles),
        )

    def update_user(
        self,
        username: str,
        password: Optional[str] = None,
        email: Optional[str] = None,
        max_bit_rate: Optional[int] = None,
        music_folder_ids: Optional[Sequence[str]] = None,
        **roles: Optional[bool],
    ) -> Envelope[EmptyResponse]:
        return self._client.execute(
            "updateUser",
            EmptyResponse,
            username=username,
            password=password,
            email=email,
            maxBitRate=max_bit_rate,
            musicFolderId=list(music_folder_ids) if music_folder_ids else None,
            **self._role_params(roles),
        )

    def delete_user(self, username: str) -> Envelope[EmptyResponse]:
        return self._client.execute("deleteUser", EmptyResponse, username=username)

    def change_password(self, username: str, password: str) -> Envelope[EmptyResponse]:
        return self._client.execute("changePassword", EmptyResponse, username=username, password=password)
