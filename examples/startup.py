"""Read service settings at startup.

Run from the project root:

    SVC_WORKERS=4 python examples/startup.py
"""

import asyncio
import logging
import pathlib

from typedenv import EnvAccessor

DEFAULTS_FILE = pathlib.Path(__file__).parent / "defaults" / "service_defaults.py"


async def read_settings() -> dict:
    env = EnvAccessor({"prefix": "SVC"})
    await env.load_defaults(str(DEFAULTS_FILE))
    return {
        "host": env.get_string("HOST"),
        "port": env.get_int("PORT"),
        "timeout": env.get_float("TIMEOUT", 10.0),
        "workers": env.get_int("WORKERS", 1),
        "allowed_origins": env.get_array("ALLOWED_ORIGINS", []),
    }


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    print(asyncio.run(read_settings()))
