import asyncio
import sys

from dataclasses import dataclass
from typing import Annotated

import cappa
import granian

from cappa.output import error_format
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text
from watchfiles import PythonFilter

from slidedeck import __version__
from slidedeck.app.deck.schema.presentation import CreatePresentationParam
from slidedeck.app.deck.service.presentation_service import presentation_service
from slidedeck.common.exception.errors import BaseExceptionError
from slidedeck.core.conf import settings
from slidedeck.database.db import async_db_session, create_tables, drop_tables
from slidedeck.utils.console import console

output_help = '\nFor more information, try "[cyan]--help[/]"'


class CustomReloadFilter(PythonFilter):
    """Custom reload filter"""

    def __init__(self) -> None:
        super().__init__(extra_extensions=['.json', '.yaml', '.yml'])


async def init() -> None:
    panel_content = Text()
    panel_content.append('Database configuration', style='bold green')
    panel_content.append('\n\n  • Type: ')
    panel_content.append(f'{settings.DATABASE_TYPE}', style='yellow')
    panel_content.append('\n  • Database: ')
    if settings.DATABASE_TYPE == 'sqlite':
        panel_content.append(f'{settings.DATABASE_SQLITE_FILENAME}', style='yellow')
    else:
        panel_content.append(f'{settings.DATABASE_SCHEMA}', style='yellow')
    panel_content.append('\n\nSlide generator', style='bold green')
    panel_content.append('\n\n  • Kind: ')
    panel_content.append(f'{settings.SLIDE_GENERATOR}', style='yellow')
    if settings.SLIDE_GENERATOR == 'llm':
        panel_content.append('\n  • Provider: ')
        panel_content.append(f'{settings.LLM_PROVIDER}', style='yellow')

    console.print(Panel(panel_content, title=f'slidedeck v{__version__} initialization', border_style='cyan', padding=(1, 2)))
    ok = Prompt.ask('Are you sure to rebuild the database tables?', choices=['y', 'n'], default='n')

    if ok.lower() == 'y':
        console.print('Initializing...', style='white')
        try:
            console.print('Dropping database tables', style='white')
            await drop_tables()
            console.print('Creating database tables', style='white')
            await create_tables()
            console.print('Initialization completed', style='green')
            console.print('\nTry [bold cyan]slidedeck run[/bold cyan] to start the service')
        except Exception as e:
            raise cappa.Exit(f'Initialization failed: {e}', code=1)
    else:
        console.print('Initialization cancelled', style='yellow')


def run(host: str, port: int, reload: bool, workers: int) -> None:  # noqa: FBT001
    url = f'http://{host}:{port}'
    docs_url = url + settings.FASTAPI_DOCS_URL
    redoc_url = url + settings.FASTAPI_REDOC_URL
    openapi_url = url + (settings.FASTAPI_OPENAPI_URL or '')

    panel_content = Text()
    panel_content.append('Python version:', style='bold cyan')
    panel_content.append(f'{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}', style='white')

    panel_content.append('\nAPI request address: ', style='bold cyan')
    panel_content.append(f'{url}{settings.FASTAPI_API_V1_PATH}/deck', style='blue')

    panel_content.append('\n\nEnvironment mode: ', style='bold green')
    env_style = 'yellow' if settings.ENVIRONMENT == 'dev' else 'green'
    panel_content.append(f'{settings.ENVIRONMENT.upper()}', style=env_style)

    panel_content.append('\nSlide generator: ', style='bold green')
    panel_content.append(f'{settings.SLIDE_GENERATOR}', style='yellow')

    if settings.ENVIRONMENT == 'dev':
        panel_content.append(f'\n\n📖 Swagger docs: {docs_url}', style='bold magenta')
        panel_content.append(f'\n📚 Redoc docs: {redoc_url}', style='bold magenta')
        panel_content.append(f'\n📡 OpenAPI JSON: {openapi_url}', style='bold magenta')

    console.print(Panel(panel_content, title=f'slidedeck v{__version__}', border_style='purple', padding=(1, 2)))
    granian.Granian(
        target='slidedeck.main:app',
        interface='asgi',
        address=host,
        port=port,
        reload=not reload,
        reload_filter=CustomReloadFilter,
        workers=workers,
    ).serve()


async def create_presentation(title: str, prompt: str, description: str | None) -> None:
    try:
        obj = CreatePresentationParam(title=title, prompt=prompt, description=description)
        await create_tables()
        async with async_db_session.begin() as db:
            presentation = await presentation_service.create(db=db, obj=obj)
    except Exception as e:
        raise cappa.Exit(e.msg if isinstance(e, BaseExceptionError) else str(e), code=1)

    table = Table(show_header=True, header_style='bold magenta', title=f'{presentation.title} (ID {presentation.id})')
    table.add_column('Order', style='cyan', no_wrap=True, justify='center')
    table.add_column('Type', style='green', no_wrap=True)
    table.add_column('Layout', style='yellow', no_wrap=True)
    table.add_column('Title', style='blue')
    for slide in presentation.slides:
        table.add_row(str(slide.order), slide.slide_type, slide.layout, slide.title)
    console.print(table)


@cappa.command(help='Initialize slidedeck database tables', default_long=True)
@dataclass
class Init:
    async def __call__(self) -> None:
        await init()


@cappa.command(help='Run API service', default_long=True)
@dataclass
class Run:
    host: Annotated[
        str,
        cappa.Arg(
            default='127.0.0.1',
            help='Host IP address to serve on, use `127.0.0.1` for local development '
            'and `0.0.0.0` for public access, e.g. within a LAN',
        ),
    ]
    port: Annotated[
        int,
        cappa.Arg(default=8000, help='Host port to serve on'),
    ]
    no_reload: Annotated[
        bool,
        cappa.Arg(default=False, help='Disable automatic server reload on (code) file changes'),
    ]
    workers: Annotated[
        int,
        cappa.Arg(default=1, help='Number of worker processes, must be used together with `--no-reload`'),
    ]

    def __call__(self) -> None:
        run(host=self.host, port=self.port, reload=self.no_reload, workers=self.workers)


@cappa.command(help='Generate a presentation from a prompt', default_long=True)
@dataclass
class Create:
    title: Annotated[str, cappa.Arg(help='Presentation title')]
    prompt: Annotated[str, cappa.Arg(help='Topic the slides are generated from')]
    description: Annotated[str | None, cappa.Arg(default=None, help='Description')] = None

    async def __call__(self) -> None:
        await create_presentation(self.title, self.prompt, self.description)


@cappa.command(help='An efficient slidedeck command line interface', default_long=True)
@dataclass
class SlideDeckCli:
    subcmd: cappa.Subcommands[Init | Run | Create]


def main() -> None:
    output = cappa.Output(error_format=f'{error_format}\n{output_help}')
    asyncio.run(cappa.invoke_async(SlideDeckCli, version=__version__, output=output))
