# label_errors.py


class LabelError(Exception):
    pass


class ImageLoadError(LabelError):
    pass


class FontLoadError(LabelError):
    pass


class ConfigParseError(LabelError):
    pass


class MissingFieldError(LabelError):
    pass


class IoError(LabelError):
    pass


class SheetOverflowError(LabelError):
    pass
