#!/usr/bin/env python3
"""Console script to inspect param conditions and column types."""

from typing import Annotated

import typer

from namerec.dbparam.columns import get_numerical_column_type
from namerec.dbparam.columns import get_textual_column_type_by_content_length
from namerec.dbparam.core.exceptions import DbParamError
from namerec.dbparam.core.logging import configure_logging
from namerec.dbparam.core.logging import get_logger
from namerec.dbparam.core.settings import get_settings
from namerec.dbparam.params.parser import parse_date_param
from namerec.dbparam.params.parser import parse_param
from namerec.dbparam.params.to_sql import condition_to_sql

app = typer.Typer(help='Inspect param conditions and advised column types.')

logger = get_logger(__name__)


@app.callback()
def main_callback(
    log_level: Annotated[
        str | None,
        typer.Option('--log-level', help='Log level (defaults to DBPARAM_LOG_LEVEL)'),
    ] = None,
) -> None:
    """Configure logging for all commands."""
    configure_logging(log_level or get_settings().log_level)


@app.command()
def param(
    column: Annotated[str, typer.Argument(help='Column the param targets')],
    value: Annotated[str, typer.Argument(help='Param value, e.g. "and,>=10,<20"')],
    date: Annotated[
        bool,
        typer.Option('--date', help='Treat values as dates'),
    ] = False,
    dialect: Annotated[
        str,
        typer.Option('--dialect', '-d', help='SQL dialect (generic, postgresql, mysql, sqlite, etc.)'),
    ] = 'generic',
    pretty: Annotated[
        bool,
        typer.Option('--pretty/--no-pretty', help='Pretty print output'),
    ] = False,
) -> None:
    """
    Print the SQL condition for a param value.

    Examples:

        dbparam param status 'and,active,!=disabled'

        dbparam param postDate '>=2024-01-01' --date --dialect mysql
    """
    condition = parse_date_param(column, value) if date else parse_param(column, value)
    logger.debug('Parsed param', column=column, value=value, condition=repr(condition))

    if condition is None:
        typer.echo('Error: Param holds no values', err=True)
        raise typer.Exit(1)

    typer.echo(condition_to_sql(condition, dialect=dialect, pretty=pretty))


@app.command('numeric-type')
def numeric_type(
    min_value: Annotated[int | None, typer.Option('--min', help='Smallest value')] = None,
    max_value: Annotated[int | None, typer.Option('--max', help='Largest value')] = None,
    decimals: Annotated[int, typer.Option('--decimals', help='Decimal places')] = 0,
) -> None:
    """Print the smallest numeric column type for a range."""
    typer.echo(get_numerical_column_type(min_value, max_value, decimals))


@app.command('text-type')
def text_type(
    length: Annotated[int, typer.Argument(help='Content length in bytes')],
    dialect: Annotated[
        str | None,
        typer.Option('--dialect', '-d', help='Database dialect (defaults to DBPARAM_DEFAULT_DIALECT)'),
    ] = None,
) -> None:
    """Print the textual column type for content of a given length."""
    try:
        typer.echo(get_textual_column_type_by_content_length(length, dialect))
    except DbParamError as e:
        typer.echo(f'Error: {e}', err=True)
        raise typer.Exit(1)


def main() -> None:
    """Entry point for the script."""
    app()


if __name__ == '__main__':
    main()
