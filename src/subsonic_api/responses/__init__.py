"""Typed response shapes for every Subsonic endpoint the client calls."""

from types import MappingProxyType

from .bookmarks import Bookmark, Bookmarks, BookmarksResponse
from .browsing import (
    AlbumInfo,
    AlbumInfoResponse,
    AlbumResponse,
    ArtistInfo,
    ArtistInfo2Response,
    ArtistInfoResponse,
    ArtistResponse,
    Artists,
    ArtistsResponse,
    Directory,
    DirectoryResponse,
    Genres,
    GenresResponse,
    Index,
    Indexes,
    IndexesResponse,
    Lyrics,
    LyricsResponse,
    MusicFolders,
    MusicFoldersResponse,
    SimilarSongs2Response,
    SimilarSongsResponse,
    SongResponse,
    TopSongsResponse,
)
from .chat import ChatMessage, ChatMessages, ChatMessagesResponse
from .common import Album, Artist, Child, Genre, MusicFolder, Songs
from .jukebox import JukeboxPlaylist, JukeboxPlaylistResponse, JukeboxStatus, JukeboxStatusResponse
from .lists import (
    AlbumList,
    AlbumList2,
    AlbumList2Response,
    AlbumListResponse,
    NowPlaying,
    NowPlayingEntry,
    NowPlayingResponse,
    RandomSongsResponse,
    SongsByGenreResponse,
    Starred,
    Starred2Response,
    StarredResponse,
)
from .playlists import Playlist, PlaylistResponse, Playlists, PlaylistsResponse, PlayQueue, PlayQueueResponse
from .podcasts import (
    NewestPodcasts,
    NewestPodcastsResponse,
    PodcastChannel,
    PodcastEpisode,
    Podcasts,
    PodcastsResponse,
)
from .radio import InternetRadioStation, InternetRadioStations, InternetRadioStationsResponse
from .search import (
    Search2Response,
    Search3Response,
    SearchResponse,
    SearchResult,
    SearchResult2,
    SearchResult3,
)
from .system import (
    EmptyResponse,
    License,
    LicenseResponse,
    OpenSubsonicExtension,
    OpenSubsonicExtensionsResponse,
    ScanStatus,
    ScanStatusResponse,
)
from .users import User, UserResponse, Users, UsersResponse
from .video import AudioTrack, Captions, VideoConversion, VideoInfo, VideoInfoResponse, Videos, VideosResponse

# Top-level payload shapes by class name, for tools that pick a shape at runtime
RESPONSE_SHAPES = MappingProxyType(
    {
        shape.__name__: shape
        for shape in (
            AlbumInfoResponse,
            AlbumList2Response,
            AlbumListResponse,
            AlbumResponse,
            ArtistInfo2Response,
            ArtistInfoResponse,
            ArtistResponse,
            ArtistsResponse,
            BookmarksResponse,
            ChatMessagesResponse,
            DirectoryResponse,
            EmptyResponse,
            GenresResponse,
            IndexesResponse,
            InternetRadioStationsResponse,
            JukeboxPlaylistResponse,
            JukeboxStatusResponse,
            LicenseResponse,
            LyricsResponse,
            MusicFoldersResponse,
            NewestPodcastsResponse,
            NowPlayingResponse,
            OpenSubsonicExtensionsResponse,
            PlayQueueResponse,
            PlaylistResponse,
            PlaylistsResponse,
            PodcastsResponse,
            RandomSongsResponse,
            ScanStatusResponse,
            Search2Response,
            Search3Response,
            SearchResponse,
            SimilarSongs2Response,
            SimilarSongsResponse,
            SongResponse,
            SongsByGenreResponse,
            Starred2Response,
            StarredResponse,
            TopSongsResponse,
            UserResponse,
            UsersResponse,
            VideoInfoResponse,
            VideosResponse,
        )
    }
)

__all__ = [
    "Album",
    "AlbumInfo",
    "AlbumInfoResponse",
    "AlbumList",
    "AlbumList2",
    "AlbumList2Response",
    "AlbumListResponse",
    "AlbumResponse",
    "Artist",
    "ArtistInfo",
    "ArtistInfo2Response",
    "ArtistInfoResponse",
    "ArtistResponse",
    "Artists",
    "ArtistsResponse",
    "AudioTrack",
    "Bookmark",
    "Bookmarks",
    "BookmarksResponse",
    "Captions",
    "ChatMessage",
    "ChatMessages",
    "ChatMessagesResponse",
    "Child",
    "Directory",
    "DirectoryResponse",
    "EmptyResponse",
    "Genre",
    "Genres",
    "GenresResponse",
    "Index",
    "Indexes",
    "IndexesResponse",
    "InternetRadioStation",
    "InternetRadioStations",
    "InternetRadioStationsResponse",
    "JukeboxPlaylist",
    "JukeboxPlaylistResponse",
    "JukeboxStatus",
    "JukeboxStatusResponse",
    "License",
    "LicenseResponse",
    "Lyrics",
    "LyricsResponse",
    "MusicFolder",
    "MusicFolders",
    "MusicFoldersResponse",
    "NewestPodcasts",
    "NewestPodcastsResponse",
    "NowPlaying",
    "NowPlayingEntry",
    "NowPlayingResponse",
    "OpenSubsonicExtension",
    "OpenSubsonicExtensionsResponse",
    "PlayQueue",
    "PlayQueueResponse",
    "Playlist",
    "PlaylistResponse",
    "Playlists",
    "PlaylistsResponse",
    "PodcastChannel",
    "PodcastEpisode",
    "Podcasts",
    "PodcastsResponse",
    "RESPONSE_SHAPES",
    "RandomSongsResponse",
    "ScanStatus",
    "ScanStatusResponse",
    "Search2Response",
    "Search3Response",
    "SearchResponse",
    "SearchResult",
    "SearchResult2",
    "SearchResult3",
    "SimilarSongs2Response",
    "SimilarSongsResponse",
    "SongResponse",
    "Songs",
    "SongsByGenreResponse",
    "Starred",
    "Starred2Response",
    "StarredResponse",
    "TopSongsResponse",
    "User",
    "UserResponse",
    "Users",
    "UsersResponse",
    "VideoConversion",
    "VideoInfo",
    "VideoInfoResponse",
    "Videos",
    "VideosResponse",
]
