# sample_app

A small domain model for "samples" (an identifier plus a name) and a
repository that stores them in a database through SQLAlchemy 2.

## Installation

```
pip install .
pip install ".[test]"   # with the test dependencies
```

## Modules

- `sample_app.value`: the value types `SampleID` and `SampleName`,
  `create_random_sample_id()` and `sample_ids_to_strings(ids)`.
- `sample_app.entity`: the frozen dataclass `Sample` and
  `create_default_sample(name)`.
- `sample_app.transaction`: `Connection`, `Transaction`, `TransactionError`,
  `connection_engine(connection)` and `con_with_tx(con, tx)`.
- `sample_app.repository`: the table mapping `SampleRecord`,
  `SampleRepository`, `create_sample_repository(connection)`,
  `setup(url)` and `spanner_dsn(...)`.

## Domain objects

```python
from sample_app.value import SampleID, SampleName, sample_ids_to_strings
from sample_app.entity import Sample, create_default_sample

name = SampleName("first")            # an empty string raises ValueError
sample = create_default_sample(name)  # the id is a random UUID v4 string
renamed = sample.update(SampleName("second"))  # a new Sample, same id

sample_ids_to_strings([SampleID("a"), SampleID("b")])  # ["a", "b"]
```

`SampleID` and `SampleName` are subclasses of `str` that raise `ValueError`
when given an empty string. `Sample` is immutable; `update` returns a copy
with the new name.

## Persistence

```python
from sample_app.repository import setup, create_sample_repository
from sample_app.transaction import Connection

engine = setup("sqlite:///samples.db")   # creates the sample_gorms table
connection = Connection(engine)
repo = create_sample_repository(connection)

connection.transaction(lambda tx: repo.save(sample, tx))

repo.find_all(None)
repo.find_by_ids([sample.id], None)
repo.delete(sample, None)
```

`setup(url)` takes any SQLAlchemy database URL, creates the engine and the
table, and returns the engine.

`SampleRepository`:

- `save(sample, tx)` inserts the sample, or updates its name if a row with
  the same id already exists.
- `find_by_ids(ids, tx)` returns the stored samples with the given ids.
  Duplicate ids yield one sample, missing ids are skipped, and an empty
  list of ids raises `ValueError`.
- `find_all(tx)` returns every stored sample.
- `delete(sample, tx)` removes the row with the sample's id.

`save` and `delete` raise `ValueError` when the sample is `None`.
Constructing a repository over `None` (for instance
`create_sample_repository(None)`) raises `ValueError`.

### Transactions

`Connection.begin()` opens a new connection and starts a `Transaction` on it.
`Transaction.commit()` and `Transaction.rollback()` finish it and close the
connection; a database failure in either raises `TransactionError`.

`Connection.transaction(func)` calls `func(tx)` inside a new transaction and
returns its result. It commits when `func` returns; when `func` raises, it
rolls back and raises `TransactionError` chained to the original error.

Every repository method takes a transaction as `tx`. With a `Transaction` the
statements run on its connection; with `None` they run on the engine in a
short transaction of their own that is committed at once.

`connection_engine(connection)` returns the engine behind a `Connection`
(`None` for `None`), and `con_with_tx(con, tx)` returns what statements run
on; both raise `TransactionError` when given an object of the wrong kind.

## What this package does not do

It is a library only: it has no command-line program and no network service
that exposes the repository. `spanner_dsn(project, instance, database)` only
builds the string `projects/<project>/instances/<instance>/databases/<database>`;
no Spanner dialect is included, so connecting to Spanner needs a SQLAlchemy
URL and driver from elsewhere.

## Tests

```
pytest
```