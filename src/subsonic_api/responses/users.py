"""Response shapes for user management."""

from typing import List, Optional

from ..schema import boolean, collection, nested, record


@record
class User:
    """Server user and the roles granted to it.

    Attributes:
        max_bit_rate: Streaming bitrate limit in kbps (0 or None for none)
        folder: IDs of the music folders the user may access
    """

    username: str = ""
    email: Optional[str] = None
    scrobbling_enabled: bool = boolean()
    max_bit_rate: Optional[int] = None
    admin_role: bool = boolean()
    settings_role: bool = boolean()
    download_role: bool = boolean()
    upload_role: bool = boolean()
    playlist_role: bool = boolean()
    cover_art_role: bool = boolean()
    comment_role: bool = boolean()
    podcast_role: bool = boolean()
    stream_role: bool = boolean()
    jukebox_role: bool = boolean()
    share_role: bool = boolean()
    video_conversion_role: bool = boolean()
    folder: List[int] = collection(int)


@record
class UserResponse:
    user: User = nested(User)


@record
class Users:
    user: List[User] = collection(User)


@record
class UsersResponse:
    users: Users = nested(Users)
