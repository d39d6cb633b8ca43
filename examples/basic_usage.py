"""
Basic usage example for dbparam.

This example demonstrates:
1. Preparing values for storage
2. Picking column types
3. Filtering a table with param conditions
"""

from datetime import datetime
from zoneinfo import ZoneInfo

from sqlalchemy import Column
from sqlalchemy import Integer
from sqlalchemy import MetaData
from sqlalchemy import String
from sqlalchemy import Table
from sqlalchemy import create_engine
from sqlalchemy import select

from namerec.dbparam import condition_to_sql
from namerec.dbparam import get_numerical_column_type
from namerec.dbparam import get_textual_column_type_by_content_length
from namerec.dbparam import parse_date_param
from namerec.dbparam import parse_param
from namerec.dbparam import prepare_values_for_db
from namerec.dbparam import to_clause

# Define schema
metadata = MetaData()

entries_table = Table(
    'entries',
    metadata,
    Column('id', Integer, primary_key=True),
    Column('title', String(100), nullable=False),
    Column('status', String(20)),
    Column('post_date', String(19)),
    Column('meta', String),
)


def main() -> None:
    """Run example."""
    # Values: dates become UTC strings, structures become JSON
    row = prepare_values_for_db({
        'title': 'Hello',
        'status': 'live',
        'post_date': datetime(2024, 1, 15, 10, 30, tzinfo=ZoneInfo('Europe/Berlin')),
        'meta': {'tags': ['news', 'db']},
    })
    print(f'Prepared row: {row}')

    # Column types
    print(f'Votes column: {get_numerical_column_type(0, 10_000)}')
    print(f'Price column: {get_numerical_column_type(0, 9999, 2)}')
    print(f'Body column (mysql): {get_textual_column_type_by_content_length(70_000, "mysql")}')

    engine = create_engine('sqlite:///:memory:')
    metadata.create_all(engine)

    with engine.begin() as conn:
        conn.execute(entries_table.insert(), row)
        conn.execute(entries_table.insert(), prepare_values_for_db({'title': 'Draft', 'status': 'pending'}))

    # Param conditions
    status = parse_param('status', 'live,pending')
    posted = parse_date_param('post_date', 'and,>=2024-01-01,<2024-02-01')
    print(f'Status SQL: {condition_to_sql(status)}')
    print(f'Date SQL (mysql): {condition_to_sql(posted, dialect="mysql")}')

    query = select(entries_table.c.title).where(
        to_clause(status, entries_table),
        to_clause(posted, entries_table),
    )
    with engine.connect() as conn:
        print(f'Matching titles: {list(conn.execute(query).scalars())}')


if __name__ == '__main__':
    main()
