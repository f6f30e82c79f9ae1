"""Response shapes for video endpoints."""

from typing import List, Optional

from ..schema import collection, nested, record
from .common import Child


@record
class Videos:
    video: List[Child] = collection(Child)


@record
class VideosResponse:
    videos: Videos = nested(Videos)


@record
class Captions:
    id: str = ""
    name: Optional[str] = None


@record
class AudioTrack:
    id: str = ""
    name: Optional[str] = None
    language_code: Optional[str] = None


@record
class VideoConversion:
    id: str = ""
    bit_rate: Optional[int] = None
    audio_track_id: Optional[int] = None


@record
class VideoInfo:
    """Captions, audio tracks and conversions available for a video."""

    id: str = ""
    captions: List[Captions] = collection(Captions)
    audio_track: List[AudioTrack] = collection(AudioTrack)
    conversion: List[VideoConversion] = collection(VideoConversion)


@record
class VideoInfoResponse:
    video_info: VideoInfo = nested(VideoInfo)
