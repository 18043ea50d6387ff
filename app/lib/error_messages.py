from app.config import IS_DEV, env_variable


class ErrorMessages:
    @staticmethod
    def default(task: str, e: Exception):
        if IS_DEV and env_variable("SHOW_DETAILED_ERROR_MESSAGES"):
            return f"ERROR {task}: {str(e)}"

        return f"An error occurred during {task}. Please try again later."

    @staticmethod
    def file_not_found(path: str):
        return f"Dictionary file '{path}' not found."

    @staticmethod
    def invalid_format(path: str, reason: str = ""):
        return f"Dictionary file '{path}' is not a flat JSON object of strings. {reason}".strip()

    REQUIRED_FIELDS_MISSING = "Required field(s) missing"
    NO_TEXT_TO_TRANSLATE = "No text to translate"
    INVALID_LOCALE = "Invalid value for locale field"
    NOTHING_TO_TRANSLATE = "Everything looks good to me!"
