from app.services.translator.translator_types import DictionaryMapping


def invert_dictionary(mapping: DictionaryMapping) -> DictionaryMapping:
    """Swap keys and values. When two keys share a value the later key wins."""
    return {value: key for key, value in mapping.items()}
