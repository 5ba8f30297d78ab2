"""Remote web element."""

from __future__ import annotations

import base64
import io
import os
import zipfile
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from ..commands import DriverCommand
from ..exceptions import WebDriverError
from ..translator import JSON_WIRE_ELEMENT_KEY, W3C_ELEMENT_KEY
from .file_detector import FileDetector, UselessFileDetector

if TYPE_CHECKING:
    from .session import RemoteSession

_SCROLL_INTO_VIEW_SCRIPT = (
    "var element = arguments[0];"
    " element.scrollIntoView(true);"
    " var rect = element.getBoundingClientRect();"
    " return {'x': rect.left, 'y': rect.top};"
)

_SUBMIT_SCRIPT = (
    "var form = arguments[0];"
    " while (form.nodeName != 'FORM' && form.parentNode) { form = form.parentNode; }"
    " if (!form) { throw Error('Unable to find containing form element'); }"
    " if (!form.ownerDocument) { throw Error('Unable to find owning document'); }"
    " var e = form.ownerDocument.createEvent('Event');"
    " e.initEvent('submit', true, true);"
    " if (form.dispatchEvent(e)) { HTMLFormElement.prototype.submit.call(form); }"
)


@dataclass(frozen=True)
class WebDriverPoint:
    x: float
    y: float


@dataclass(frozen=True)
class WebDriverDimension:
    width: float
    height: float


class RemoteWebElement:
    """An element inside a remote session.

    Dialect differences the command tables cannot express are handled
    here: W3C has no element equality, scroll-into-view location or submit
    commands, so those fall back to local comparison or scripts.
    """

    def __init__(self, session: "RemoteSession", element_id: str) -> None:
        self.session = session
        self._id = element_id
        self.file_detector: FileDetector = UselessFileDetector()

    @property
    def id(self) -> str:
        return self._id

    def __repr__(self) -> str:
        return f"<RemoteWebElement id={self._id!r} session={self.session.session_id!r}>"

    def to_reference(self) -> Dict[str, str]:
        """The element as a script argument in the session's dialect."""
        key = W3C_ELEMENT_KEY if self.session.dialect.is_w3c() else JSON_WIRE_ELEMENT_KEY
        return {key: self._id}

    def _execute(self, name: DriverCommand, params: Optional[Dict[str, Any]] = None) -> Any:
        payload = {":id": self._id}
        payload.update(params or {})
        return self.session.execute(name, payload)

    def clear(self) -> "RemoteWebElement":
        self._execute(DriverCommand.CLEAR_ELEMENT)
        return self

    def click(self) -> "RemoteWebElement":
        self._execute(DriverCommand.CLICK_ELEMENT)
        return self

    def find_element(self, using: str, value: str) -> "RemoteWebElement":
        """Find the first child element matching the locator.

        Raises:
            NoSuchElementException: If nothing matches.
        """
        raw_element = self._execute(
            DriverCommand.FIND_CHILD_ELEMENT, {"using": using, "value": value}
        )
        return self._new_element(self.session.translator.translate_element(raw_element))

    def find_elements(self, using: str, value: str) -> List["RemoteWebElement"]:
        """Find all child elements matching the locator (possibly none)."""
        raw_elements = self._execute(
            DriverCommand.FIND_CHILD_ELEMENTS, {"using": using, "value": value}
        )
        translator = self.session.translator
        return [
            self._new_element(translator.translate_element(raw))
            for raw in raw_elements or []
        ]

    def get_attribute(self, attribute_name: str) -> Optional[str]:
        return self._execute(DriverCommand.GET_ELEMENT_ATTRIBUTE, {":name": attribute_name})

    def get_css_value(self, css_property_name: str) -> str:
        return self._execute(
            DriverCommand.GET_ELEMENT_VALUE_OF_CSS_PROPERTY,
            {":propertyName": css_property_name},
        )

    def get_location(self) -> WebDriverPoint:
        location = self._execute(DriverCommand.GET_ELEMENT_LOCATION)
        return WebDriverPoint(location["x"], location["y"])

    def get_location_on_screen_once_scrolled_into_view(self) -> WebDriverPoint:
        if self.session.dialect.is_w3c():
            location = self.session.execute(
                DriverCommand.EXECUTE_SCRIPT,
                {"script": _SCROLL_INTO_VIEW_SCRIPT, "args": [self.to_reference()]},
            )
        else:
            location = self._execute(DriverCommand.GET_ELEMENT_LOCATION_ONCE_SCROLLED_INTO_VIEW)
        return WebDriverPoint(location["x"], location["y"])

    def get_size(self) -> WebDriverDimension:
        size = self._execute(DriverCommand.GET_ELEMENT_SIZE)
        return WebDriverDimension(size["width"], size["height"])

    def get_tag_name(self) -> str:
        # Some legacy drivers answer in upper case
        return (self._execute(DriverCommand.GET_ELEMENT_TAG_NAME) or "").lower()

    def get_text(self) -> str:
        return self._execute(DriverCommand.GET_ELEMENT_TEXT)

    def is_displayed(self) -> bool:
        return bool(self._execute(DriverCommand.IS_ELEMENT_DISPLAYED))

    def is_enabled(self) -> bool:
        return bool(self._execute(DriverCommand.IS_ELEMENT_ENABLED))

    def is_selected(self) -> bool:
        return bool(self._execute(DriverCommand.IS_ELEMENT_SELECTED))

    def send_keys(self, value: Any) -> "RemoteWebElement":
        """Type ``value`` into the element.

        When a :class:`LocalFileDetector` is set and ``value`` names a local
        file, the file is uploaded first and its remote path is typed.
        """
        local_file = self.file_detector.get_local_file(value)
        if local_file is not None:
            value = self.upload(local_file)
        self._execute(DriverCommand.SEND_KEYS_TO_ELEMENT, {"value": value})
        return self

    def set_file_detector(self, detector: FileDetector) -> "RemoteWebElement":
        self.file_detector = detector
        return self

    def submit(self) -> "RemoteWebElement":
        if self.session.dialect.is_w3c():
            self.session.execute(
                DriverCommand.EXECUTE_SCRIPT,
                {"script": _SUBMIT_SCRIPT, "args": [self.to_reference()]},
            )
        else:
            self._execute(DriverCommand.SUBMIT_ELEMENT)
        return self

    def equals(self, other: "RemoteWebElement") -> bool:
        """Whether both elements refer to the same DOM element."""
        if self.session.dialect.is_w3c():
            return self._id == other.id
        return bool(self._execute(DriverCommand.ELEMENT_EQUALS, {":other": other.id}))

    def upload(self, local_file: str) -> str:
        """Upload a local file to the remote end and return its remote path.

        Raises:
            WebDriverError: If ``local_file`` is not a file.
        """
        if not os.path.isfile(local_file):
            raise WebDriverError(f"You may only upload files: {local_file}")

        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as archive:
            archive.write(local_file, os.path.basename(local_file))
        encoded = base64.b64encode(buffer.getvalue()).decode("ascii")

        return self.session.execute(DriverCommand.UPLOAD_FILE, {"file": encoded})

    def _new_element(self, element_id: str) -> "RemoteWebElement":
        return type(self)(self.session, element_id)
