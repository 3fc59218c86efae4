# === FILE: crawl_fingerprint/cli.py ===
#!/usr/bin/env python3
"""
Точка входа командной строки crawl_fingerprint.

Команды:
  key       Вывести ключ конфига запроса (YAML/JSON файл или '-' для stdin)
  hash      Вывести MD5 строки
  resolve   Разрешить ссылку относительно базового URL
  links     Извлечь ссылки из HTML-файла

Общие опции:
  --config PATH       Файл настроек YAML/JSON
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stderr, если не указан)
  --debug CHANNEL     Включить debug-канал (request, browser); можно повторять

Пример:
  crawl-fingerprint --debug request key request.yaml --canonical
"""
import json
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from crawl_fingerprint import __version__
from crawl_fingerprint.canonical import canonicalize
from crawl_fingerprint.config import apply_settings, load_request_config, load_settings
from crawl_fingerprint.exceptions import InvalidConfig
from crawl_fingerprint.keys import generate_key, hash_content
from crawl_fingerprint.links.extractor import extract_links
from crawl_fingerprint.links.models import PageData
from crawl_fingerprint.links.resolver import resolve_url
from crawl_fingerprint.logger import DEBUG_CHANNELS, debug_browser, debug_request, logger

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='crawl_fingerprint, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу настроек YAML/JSON.'
)
@click.option(
    '--log-level', 'log_level',
    default=None,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования (перекрывает настройки)'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (stderr, если не указан)'
)
@click.option(
    '--debug', 'debug_channels',
    multiple=True,
    type=click.Choice(DEBUG_CHANNELS),
    help='Включить debug-канал'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, debug_channels):
    """Группа команд crawl_fingerprint CLI."""
    try:
        settings = load_settings(config_path)
    except (OSError, ValueError, TypeError, ValidationError) as e:
        print_error(f'Ошибка загрузки настроек: {e}')

    overrides = {}
    if log_level is not None:
        overrides['log_level'] = log_level
    if log_file is not None:
        overrides['log_file'] = log_file
    if debug_channels:
        overrides['debug'] = [*settings.debug, *debug_channels]
    if overrides:
        settings = settings.model_validate({**settings.model_dump(), **overrides})

    # stdout carries command results only
    apply_settings(settings, stream=sys.stderr)
    ctx.ensure_object(dict)
    ctx.obj['settings'] = settings


@cli.command('key', context_settings=CONTEXT_SETTINGS)
@click.argument('source', type=str)
@click.option('--canonical', is_flag=True, help='Также вывести каноническую форму')
def key(source, canonical):
    """Вывести ключ конфига запроса из SOURCE (файл или '-' для JSON из stdin)."""
    try:
        if source == '-':
            with click.open_file('-', 'r', encoding='utf-8') as stdin:
                options = json.loads(stdin.read())
        else:
            options = load_request_config(source)
    except json.JSONDecodeError as e:
        print_error(f'Неправильный JSON во входных данных: {e}')
    except (OSError, ValueError, TypeError) as e:
        print_error(f'Ошибка загрузки конфига запроса: {e}')

    try:
        result = generate_key(options, debug=debug_request)
        payload = canonicalize(options) if canonical else None
    except InvalidConfig as e:
        print_error(f'Конфиг нельзя сериализовать: {e}')

    click.echo(result)
    if payload is not None:
        click.echo(payload.decode('utf-8'))


@cli.command('hash', context_settings=CONTEXT_SETTINGS)
@click.argument('text', type=str)
def hash_command(text):
    """Вывести полный MD5 (hex) строки TEXT."""
    click.echo(hash_content(text))


@cli.command('resolve', context_settings=CONTEXT_SETTINGS)
@click.argument('reference', type=str)
@click.argument('base', type=str)
def resolve(reference, base):
    """Разрешить REFERENCE относительно BASE."""
    url = resolve_url(reference, base, debug=debug_request)
    if url is None:
        print_error(f'Ссылка не ведёт на страницу: {reference!r}')
    click.echo(url)


@cli.command('links', context_settings=CONTEXT_SETTINGS)
@click.argument('html_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument('base', type=str)
def links(html_file, base):
    """Извлечь ссылки из HTML_FILE, разрешая их относительно BASE."""
    page = PageData(url=base, content=html_file.read_bytes())
    found = extract_links(page, debug=debug_browser)
    logger.debug("Found %d links in %s", len(found), html_file)
    for url in found:
        click.echo(url)


if __name__ == "__main__":
    cli()
