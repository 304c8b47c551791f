from . import birthdays, churches, events, occurrences, resources

ROUTERS = (
    churches.router,
    resources.router,
    events.router,
    birthdays.router,
    occurrences.router,
)
