"""Environment helpers for tests."""

import os
from collections.abc import Generator
from contextlib import contextmanager


@contextmanager
def env_vars(new_env: dict[str, str | None]) -> Generator[None, None, None]:
    """Temporarily set (or, for None values, unset) environment variables."""
    # Save the old values
    old_values = {k: os.getenv(k) for k in new_env.keys()}

    # Set the new values
    for k, v in new_env.items():
        if v is None:
            os.environ.pop(k, None)
        else:
            os.environ[k] = v
    try:
        yield
    finally:
        # Put everything back to how it was
        for k, v in old_values.items():
            if v is None:
                os.environ.pop(k, None)
            else:
                os.environ[k] = v
