"""
Council general-question archive.

Administrators paste YouTube timestamps with summaries, and visitors search
the resulting records with links that jump to the cited moment of the video.
"""

from council_archive.config import config

__version__ = config.APP_VERSION
