import json
import logging
from pathlib import Path
from typing import Union

from pydantic import TypeAdapter, ValidationError

from app.lib.error_messages import ErrorMessages
from app.services.translator.dictionary_exception import DictionaryError, DictionaryErrorCode
from app.services.translator.translator_types import DictionaryConfig, DictionaryMapping

logger = logging.getLogger(__name__)

DICTIONARY_FILES = {
    "american_only": "american_only.json",
    "british_only": "british_only.json",
    "american_to_british_spelling": "american_to_british_spelling.json",
    "american_to_british_titles": "american_to_british_titles.json",
}

_mapping_adapter = TypeAdapter(DictionaryMapping)


def load_dictionary(path: Path) -> DictionaryMapping:
    if not path.is_file():
        raise DictionaryError(DictionaryErrorCode.FILE_NOT_FOUND, ErrorMessages.file_not_found(str(path)))

    try:
        with open(path, "r", encoding="utf-8") as file:
            return _mapping_adapter.validate_python(json.load(file), strict=True)
    except (json.JSONDecodeError, ValidationError) as ex:
        raise DictionaryError(
            DictionaryErrorCode.INVALID_FORMAT,
            ErrorMessages.invalid_format(str(path), str(ex)),
        ) from ex


def load_dictionaries(directory: Union[str, Path]) -> DictionaryConfig:
    """
    Load the four dictionary JSON files from a directory.

    Args:
        directory (Union[str, Path]): Folder containing the files listed in DICTIONARY_FILES.

    Returns:
        DictionaryConfig: The loaded dictionaries.

    Raises:
        DictionaryError: If a file is missing or is not a flat JSON object of strings.
    """
    directory = Path(directory)
    mappings = {}
    for field, filename in DICTIONARY_FILES.items():
        mappings[field] = load_dictionary(directory / filename)
        logger.info("Loaded %s entries from %s", len(mappings[field]), filename)

    return DictionaryConfig(**mappings)
