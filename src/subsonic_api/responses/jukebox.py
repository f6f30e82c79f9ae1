"""Response shapes for jukebox control.

Every jukebox action answers with the same status record; ``get`` adds the
playlist entries next to the status fields of one flat wire object.
"""

from typing import List

from ..schema import boolean, collection, inline, nested, record
from .common import Child


@record
class JukeboxStatus:
    current_index: int = 0
    playing: bool = boolean()
    gain: float = 0.0
    position: int = 0


@record
class JukeboxStatusResponse:
    jukebox_status: JukeboxStatus = nested(JukeboxStatus)


@record
class JukeboxPlaylist:
    status: JukeboxStatus = inline(JukeboxStatus)
    entry: List[Child] = collection(Child)


@record
class JukeboxPlaylistResponse:
    jukebox_playlist: JukeboxPlaylist = nested(JukeboxPlaylist)
