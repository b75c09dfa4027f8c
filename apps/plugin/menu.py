"""Menu structures handed to the host.

The host owns the menu model; these dataclasses only mirror the shape
it expects so the plugin can describe its entries. ``to_json()``
produces the camelCase payload the host front end reads.
"""
import enum
from dataclasses import asdict, dataclass, field


class MenuItemType(enum.Enum):
    LINK = "Link"
    DROPDOWN = "Dropdown"


class LocaleNames:
    ENGLISH = "en-US"
    DANISH = "da"


class LanguageNames:
    ENGLISH = "English"
    DANISH = "Danish"


def _camel(name):
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _json_dict_factory(pairs):
    result = {}
    for key, value in pairs:
        if isinstance(value, enum.Enum):
            value = value.value
        result[_camel(key)] = value
    return result


class _JsonMixin:

    def to_json(self):
        return asdict(self, dict_factory=_json_dict_factory)


@dataclass
class MenuTranslation(_JsonMixin):
    locale_name: str
    name: str
    language: str


@dataclass
class MenuTemplatePermission(_JsonMixin):
    claim_name: str
    permission_name: str
    permission_type_name: str


@dataclass
class MenuTemplate(_JsonMixin):
    name: str
    e2e_id: str
    default_link: str
    permissions: list = field(default_factory=list)
    translations: list = field(default_factory=list)


@dataclass
class PluginMenuItem(_JsonMixin):
    name: str
    e2e_id: str
    link: str
    type: MenuItemType
    position: int
    translations: list = field(default_factory=list)
    menu_template: MenuTemplate = None
    child_items: list = field(default_factory=list)


@dataclass
class HeaderMenuItem(_JsonMixin):
    name: str
    e2e_id: str
    link: str = ""
    position: int = 0
    menu_items: list = field(default_factory=list)


@dataclass
class HeaderMenu(_JsonMixin):
    left_menu: list = field(default_factory=list)
    right_menu: list = field(default_factory=list)
