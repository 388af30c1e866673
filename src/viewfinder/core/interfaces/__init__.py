from .fs import PathResolverProtocol
from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .render import FormatterProtocol
from .routes import RouteResolverProtocol
from .scanning import ReferenceScannerProtocol

__all__ = [
    'PathResolverProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'FormatterProtocol',
    'RouteResolverProtocol',
    'ReferenceScannerProtocol',
]
