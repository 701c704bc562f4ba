"""
Row-level access policy

Each (role, table, operation) has at most one rule. A missing rule means the
operation is refused. ``using`` narrows the rows a query can see, ``check``
must hold for a row being written.
"""
from app.models import Package, Place, Cab, Service, Booking, Contact
from app.models.enums import RecordStatus, BookingStatus, ContactStatus

ANONYMOUS = 'anonymous'
AUTHENTICATED = 'authenticated'
ADMIN = 'admin'

SELECT = 'select'
INSERT = 'insert'
UPDATE = 'update'
DELETE = 'delete'

ALL_OPERATIONS = (SELECT, INSERT, UPDATE, DELETE)


class Rule:
    def __init__(self, using=None, check=None):
        self.using = using
        self.check = check

    def filter(self, model, query):
        if self.using is None:
            return query
        return query.filter(self.using(model))

    def permits(self, row):
        return self.check is None or bool(self.check(row))


class Policy:
    def __init__(self):
        self._rules = {}
        self._superusers = set()

    def allow(self, roles, tables, operations, using=None, check=None):
        rule = Rule(using=using, check=check)
        for role in roles:
            for table in tables:
                for operation in operations:
                    self._rules[(role, table.__tablename__, operation)] = rule
        return self

    def allow_everything(self, role):
        self._superusers.add(role)
        return self

    def rule_for(self, role, model, operation):
        if role in self._superusers:
            return Rule()
        return self._rules.get((role, model.__tablename__, operation))


def _active_only(model):
    return model.status == RecordStatus.ACTIVE.value


def build_default_policy():
    public = (ANONYMOUS, AUTHENTICATED)
    policy = Policy()
    policy.allow(public, (Package, Place, Cab, Service), (SELECT,), using=_active_only)
    policy.allow(public, (Booking,), (INSERT,),
                 check=lambda row: row.status == BookingStatus.PENDING.value)
    policy.allow(public, (Contact,), (INSERT,),
                 check=lambda row: row.status == ContactStatus.PENDING.value)
    policy.allow_everything(ADMIN)
    return policy


default_policy = build_default_policy()
