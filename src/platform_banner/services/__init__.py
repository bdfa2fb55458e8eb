from platform_banner.services.decoders import DecoderError, decode_latest_song
from platform_banner.services.lastfm import LastFmProto, lastfm_client, latest_song_url

__all__ = [
    "DecoderError",
    "LastFmProto",
    "decode_latest_song",
    "lastfm_client",
    "latest_song_url",
]
