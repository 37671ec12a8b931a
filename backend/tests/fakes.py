"""In-memory stand-ins for the repository and the psycopg2 pool."""
import psycopg2


class FakeRepository:
    """Behaves like the employees table: text columns, integer id."""

    def __init__(self):
        self.rows = {}
        self._next_id = 1
        self.calls = []

    def list_all(self):
        self.calls.append('list_all')
        return [dict(self.rows[k]) for k in sorted(self.rows)]

    def create(self, name, role):
        self.calls.append('create')
        row = {'id': self._next_id, 'name': str(name), 'role': str(role)}
        self.rows[self._next_id] = row
        self._next_id += 1
        return dict(row)

    def delete(self, employee_id):
        self.calls.append('delete')
        try:
            key = int(employee_id)
        except ValueError:
            raise psycopg2.DataError(f'invalid input syntax for type integer: "{employee_id}"')
        return self.rows.pop(key, None) is not None


class BrokenRepository:
    """Every call fails the way a dropped PostgreSQL connection does."""

    def _fail(self, *args, **kwargs):
        raise psycopg2.OperationalError('server closed the connection unexpectedly')

    list_all = create = delete = _fail


class FakeCursor:
    def __init__(self, rows=None, rowcount=0, error=None):
        self.rows = rows or []
        self.rowcount = rowcount
        self.error = error
        self.executed = []

    def execute(self, query, params=None):
        self.executed.append((query, params))
        if self.error is not None:
            raise self.error

    def fetchall(self):
        return list(self.rows)

    def fetchone(self):
        return self.rows[0] if self.rows else None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        return False


class FakeConnection:
    def __init__(self, cursor):
        self._cursor = cursor
        self.closed = 0
        self.commits = 0
        self.rollbacks = 0

    def cursor(self, cursor_factory=None):
        return self._cursor

    def commit(self):
        self.commits += 1

    def rollback(self):
        self.rollbacks += 1


class FakePool:
    def __init__(self, minconn, maxconn, **kwargs):
        self.minconn = minconn
        self.maxconn = maxconn
        self.kwargs = kwargs
        self.connection = None
        self.returned = []
        self.closed_all = False

    def getconn(self):
        return self.connection

    def putconn(self, conn, close=False):
        self.returned.append((conn, close))

    def closeall(self):
        self.closed_all = True
