
import logging

from geonav.utils.mixins import LoggingMixin


class Foo(LoggingMixin):
    pass


def test_logger_name():
    assert Foo().logger.name == f'{__name__}.Foo'
    assert Foo('sub').logger.name == f'{__name__}.Foo.sub'


def test_logger_follows_package_level(caplog):
    class Converter(LoggingMixin):
        pass

    Converter.__module__ = 'geonav.testing'
    converter = Converter()
    assert converter.logger.name == 'geonav.testing.Converter'

    converter.logger.debug('hidden message')
    assert 'hidden message' not in caplog.text

    caplog.set_level(logging.DEBUG, logger='geonav')
    converter.logger.debug('visible message')
    assert 'visible message' in caplog.text
