"""Language Schemas — supported and custom languages.

Invariants:
    - AddLanguageRequest checks name, code, localeCode, threeLettersCode,
      pluralCategoryNames, then textDirection presence and value (ltr/rtl)
    - EditLanguageRequest only allows replace/test patches with a string or list of strings
"""

from enum import Enum
from typing import Any

from crowdin_sdk.core.errors import RequestValidationError
from crowdin_sdk.schemas.base import CrowdinModel, DataResponse, ListResponse, Request


class TextDirection(str, Enum):
    LTR = "ltr"
    RTL = "rtl"


class Language(CrowdinModel):
    id: str = ""
    name: str = ""
    editor_code: str = ""
    two_letters_code: str = ""
    three_letters_code: str = ""
    locale: str = ""
    android_code: str = ""
    osx_code: str = ""
    osx_locale: str = ""
    plural_category_names: list[str] = []
    plural_rules: str = ""
    plural_examples: list[str] = []
    text_direction: str = ""
    dialect_of: str = ""


LanguagesGetResponse = DataResponse[Language]
LanguagesListResponse = ListResponse[Language]
LanguagesEditResponse = DataResponse[Language]
LanguagesAddResponse = DataResponse[Language]


class EditLanguageRequest(Request):
    """Patch for a custom language; only replace and test are accepted."""
    op: str = ""
    path: str = ""
    value: Any = None

    def validate(self) -> None:
        if not self.op:
            raise RequestValidationError("op is required")
        if self.op not in ("replace", "test"):
            raise RequestValidationError('op must be "replace" or "test"')
        if not self.path:
            raise RequestValidationError("path is required")
        if self.value is None:
            raise RequestValidationError("value is required")
        is_str_list = isinstance(self.value, list) and all(isinstance(v, str) for v in self.value)
        if not isinstance(self.value, str) and not is_str_list:
            raise RequestValidationError("value must be a string or an array of strings")


class AddLanguageRequest(Request):
    name: str = ""
    code: str = ""
    locale_code: str = ""
    text_direction: str = ""
    plural_category_names: list[str] = []
    three_letters_code: str = ""
    two_letters_code: str = ""
    dialect_of: str = ""

    def validate(self) -> None:
        if not self.name:
            raise RequestValidationError("name is required")
        if not self.code:
            raise RequestValidationError("code is required")
        if not self.locale_code:
            raise RequestValidationError("localeCode is required")
        if not self.three_letters_code:
            raise RequestValidationError("threeLettersCode is required")
        if not self.plural_category_names:
            raise RequestValidationError("pluralCategoryNames is required")
        if not self.text_direction:
            raise RequestValidationError("textDirection is required")
        if self.text_direction not in (TextDirection.LTR, TextDirection.RTL):
            raise RequestValidationError('textDirection must be "ltr" or "rtl"')
