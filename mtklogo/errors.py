"""
Errors raised while reading, converting or writing logo images.

Everything derives from MtkLogoError so the command line front-end can
report any of them with a single except clause.
"""


class MtkLogoError(Exception):
    pass


class FormatError(MtkLogoError, ValueError):
    """The container itself is not what we expect (header, table)."""


class BadMagic(FormatError):
    pass


class UnknownType(FormatError):
    pass


class NotALogo(FormatError):
    pass


class SizeMismatch(FormatError):
    pass


class BadOffsets(FormatError):
    """Offsets table would give a slot a negative, empty or misplaced span."""


class BadPadding(FormatError):
    pass


class TruncatedData(FormatError):
    pass


class CodecError(MtkLogoError):
    """zlib could not inflate/deflate a slot."""


class MalformedPixelData(MtkLogoError, ValueError):
    pass


class UnknownColorMode(MtkLogoError, ValueError):
    pass


class NamingError(MtkLogoError, ValueError):
    pass


class ImageDecodeError(MtkLogoError):
    pass


class ImageEncodeError(MtkLogoError):
    pass


class ConfigError(MtkLogoError):
    pass


class FormatNotFound(MtkLogoError, LookupError):
    """No profile format matches a slot's inflated size."""
