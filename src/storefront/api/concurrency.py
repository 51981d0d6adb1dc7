"""Running blocking domain calls off the event loop.

Password hashing and the per-user cart lock both block the calling thread.
Routes hand such calls to Starlette's threadpool, where each call gets its
own storefront domain context.
"""

from functools import partial

from fastapi.concurrency import run_in_threadpool

from storefront.domain import storefront


def _in_domain_context(func, /, *args, **kwargs):
    with storefront.domain_context():
        return func(*args, **kwargs)


async def run_in_domain_thread(func, /, *args, **kwargs):
    """Await ``func(*args, **kwargs)`` run on a worker thread inside a domain context."""
    return await run_in_threadpool(partial(_in_domain_context, func, *args, **kwargs))
