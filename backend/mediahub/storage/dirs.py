import aiofiles.os


async def ensure_dir(path) -> None:
    """Create *path* and any missing parents.  No-op if it already exists.

    Anything other than "already exists" (permission denied, a regular file
    in the way) is raised to the caller.
    """
    await aiofiles.os.makedirs(path, exist_ok=True)
