"""Component variants the exporter can build.

Each variant claims source nodes through ``node_matches`` and fills its JSON
payload in ``build``. Text variants (body, heading, quote) convert their
markup to Markdown; media variants reference their source URL, bundling
images so they ship with the document.
"""

from .audio import Audio
from .body import Body
from .component import Component, compute_column_start
from .divider import Divider
from .embed_web_video import EmbedWebVideo
from .heading import Heading
from .image import Image
from .quote import Quote
from .title import Title
from .video import Video

__all__ = [
    'Component',
    'compute_column_start',
    'Audio',
    'Body',
    'Divider',
    'EmbedWebVideo',
    'Heading',
    'Image',
    'Quote',
    'Title',
    'Video'
]
