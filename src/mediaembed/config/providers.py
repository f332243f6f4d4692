"""
Built-in provider profiles.

Each entry is turned into a ProviderProfile by mediaembed.registry.
Rules are tried in order; a rule with a "join_token" lets later rules
append their capture to the same playable id (e.g. a YouTube video plus
its playlist, a Bandcamp album plus one of its tracks).
"""

from mediaembed.config.defaults import DEFAULT_DIMS

_HTTP = r"^(?:https?://)?"

PROVIDERS = [
    {
        "name": "youtube",
        "src": "https://www.youtube-nocookie.com/embed",
        "rules": [
            {
                "category": "video",
                "pattern": _HTTP
                + r"(?:www\.|m\.)?(?:youtube\.com/(?:watch\?v=|embed/|v/|shorts/|live/)|youtu\.be/)([^&?/]+)",
                "capture": 1,
                "join_token": "?",
            },
            {
                "category": "list",
                "pattern": _HTTP + r"(?:www\.|m\.)?(?:youtube\.com|youtu\.be)/\S*[?&]list=([^&?/]+)",
                "capture": 1,
                "prefix": "list=",
            },
        ],
        # A playlist-only URL plays through the videoseries endpoint
        "standalone_joins": {"list": "/videoseries?"},
        "params": {
            "autoplay": {"default": "0", "valid": ["0", "1"]},
            "cc_load_policy": {"default": "0", "valid": ["0", "1"]},
            "color": {"default": "red", "valid": ["red", "white"]},
            "controls": {"default": "1", "valid": ["0", "1", "2"]},
            "disablekb": {"default": "0", "valid": ["0", "1"]},
            "enablejsapi": {"default": "0", "valid": ["0", "1"]},
            "end": {"default": "", "valid": "number"},
            "fs": {"default": "1", "valid": ["0", "1"]},
            "hl": {"default": "", "valid": "text"},
            "iv_load_policy": {"default": "1", "valid": ["1", "3"]},
            "loop": {"default": "0", "valid": ["0", "1"]},
            "modestbranding": {"default": "0", "valid": ["0", "1"]},
            "origin": {"default": "", "valid": "url"},
            "playsinline": {"default": "0", "valid": ["0", "1"]},
            "rel": {"default": "1", "valid": ["0", "1"]},
            "start": {"default": "", "valid": "number"},
        },
        "dims": dict(DEFAULT_DIMS),
    },
    {
        "name": "vimeo",
        "mode": "oembed",
        "src": "https://player.vimeo.com/video",
        "rules": [
            {
                "category": "video",
                "pattern": _HTTP
                + r"(?:www\.|player\.)?vimeo\.com/(?:video/|channels/[\w-]+/|groups/[\w-]+/videos/)?(\d+)",
                "capture": 1,
            },
        ],
        "oembed": {
            "endpoint": "https://vimeo.com/api/oembed.json",
            "url_base": "https://vimeo.com/",
            "id_field": "video_id",
        },
        "script": "https://player.vimeo.com/api/player.js",
        "params": {
            "autopause": {"default": "1", "valid": ["0", "1"]},
            "autoplay": {"default": "0", "valid": ["0", "1"]},
            "background": {"default": "0", "valid": ["0", "1"]},
            "byline": {"default": "1", "valid": ["0", "1"]},
            "color": {"default": "#00adef", "valid": "color"},
            "dnt": {"default": "0", "valid": ["0", "1"]},
            "loop": {"default": "0", "valid": ["0", "1"]},
            "muted": {"default": "0", "valid": ["0", "1"]},
            "portrait": {"default": "1", "valid": ["0", "1"]},
            "title": {"default": "1", "valid": ["0", "1"]},
        },
        "dims": dict(DEFAULT_DIMS),
    },
    {
        "name": "dailymotion",
        "src": "https://www.dailymotion.com/embed/video",
        "rules": [
            {
                "category": "video",
                "pattern": _HTTP + r"(?:www\.)?(?:dailymotion\.com/(?:embed/)?video/|dai\.ly/)([a-z0-9]+)",
                "capture": 1,
            },
        ],
        "params": {
            "autoplay": {"default": "false", "valid": ["false", "true"]},
            "controls": {"default": "true", "valid": ["false", "true"]},
            "endscreen-enable": {"default": "true", "valid": ["false", "true"]},
            "mute": {"default": "false", "valid": ["false", "true"]},
            "queue-enable": {"default": "true", "valid": ["false", "true"]},
            "sharing-enable": {"default": "true", "valid": ["false", "true"]},
            "start": {"default": "0", "valid": "number"},
            "ui-highlight": {"default": "#ffcc33", "valid": "color"},
            "ui-logo": {"default": "true", "valid": ["false", "true"]},
            "ui-start-screen-info": {"default": "true", "valid": ["false", "true"]},
        },
        "dims": dict(DEFAULT_DIMS),
    },
    {
        "name": "bandcamp",
        "src": "https://bandcamp.com/EmbeddedPlayer",
        "join_tokens": ["/", "/", "/"],
        "rules": [
            {
                "category": "album",
                "pattern": r"bandcamp\.com/EmbeddedPlayer/(?:\S+/)?album=(\d+)",
                "capture": 1,
                "prefix": "album=",
                "join_token": "/",
            },
            {
                "category": "track",
                "pattern": r"bandcamp\.com/EmbeddedPlayer/(?:\S+/)?track=(\d+)",
                "capture": 1,
                "prefix": "track=",
            },
        ],
        "params": {
            "size": {"default": "large", "force": True, "valid": ["large", "small"]},
            "artwork": {"default": "", "valid": ["", "none", "big", "small"]},
            "bgcol": {"default": "#ffffff", "valid": "color"},
            "linkcol": {"default": "#0687f5", "valid": "color"},
            "tracklist": {"default": "true", "valid": ["true", "false"]},
            "transparent": {"default": "true", "valid": ["true", "false"]},
        },
        "dims": {"width": "350", "height": "470", "ratio": ""},
    },
    {
        "name": "soundcloud",
        "src": "https://w.soundcloud.com/player",
        "join_tokens": ["/?url=", "?", "&amp;"],
        "rules": [
            {
                "category": "track",
                "pattern": r"^((?:https?://)?(?:www\.|m\.)?soundcloud\.com/[\w-]+/(?:sets/)?[\w-]+)",
                "capture": 1,
            },
        ],
        "params": {
            "auto_play": {"default": "false", "valid": ["false", "true"]},
            "buying": {"default": "true", "valid": ["false", "true"]},
            "color": {"default": "#ff5500", "valid": "color"},
            "download": {"default": "true", "valid": ["false", "true"]},
            "show_artwork": {"default": "true", "valid": ["false", "true"]},
            "show_comments": {"default": "true", "valid": ["false", "true"]},
            "show_playcount": {"default": "true", "valid": ["false", "true"]},
            "show_user": {"default": "true", "valid": ["false", "true"]},
            "visual": {"default": "false", "valid": ["false", "true"]},
        },
        # Fluid width, fixed waveform height
        "dims": {"width": "100%", "height": "166", "ratio": ""},
    },
]


def list_supported_providers() -> list[str]:
    """List all built-in provider names."""
    return [p["name"] for p in PROVIDERS]


def get_provider_count() -> int:
    """Return the number of built-in providers."""
    return len(PROVIDERS)
