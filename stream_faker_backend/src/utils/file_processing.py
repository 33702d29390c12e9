import logging
from typing import Optional

from fastapi import UploadFile

from errors import InvalidInputError

logger = logging.getLogger(__name__)


async def read_schema_file(schema_file: Optional[UploadFile]) -> str:
    if schema_file is None:
        raise InvalidInputError("Schema file is required.")

    content_bytes = await schema_file.read()
    if not content_bytes:
        raise InvalidInputError("Schema file is required.")

    try:
        content = content_bytes.decode("utf-8")
    except UnicodeDecodeError as e:
        logger.error(f"Schema file {schema_file.filename} is not valid UTF-8: {e}")
        raise InvalidInputError("Schema file must be UTF-8 encoded JSON.") from e

    logger.info(f"Read schema file {schema_file.filename} ({len(content_bytes)} bytes)")
    return content
