"""
Typed form structures for entity browser widgets.

Widgets describe their forms with small dataclasses instead of nested
dicts. The browser front end receives them through ``Form.to_dict()``.

Elements:
    Markup: Read-only message
    TextField: Single-line text input
    SelectField: Choice from a mapping of value -> label
    CheckboxField: Boolean toggle
    UploadField: File upload with named validators
    SubmitButton: Button; ``main_submit`` marks the widget's primary action

Usage:
    form = Form()
    form["upload"] = UploadField(title="Files", validators={})
    form["upload"].validators["file_validate_extensions"] = ["mp3 wav"]
    form["actions"] = SubmitButton(value="Select files", main_submit=True)

    form_state = FormState(values={"upload": [file_id]})
    form_state.triggering_element = form["actions"]
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, ClassVar


@dataclass
class FormElement:
    """Base class for form elements."""

    element_type: ClassVar[str] = "element"

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["type"] = self.element_type
        return data


@dataclass
class Markup(FormElement):
    element_type: ClassVar[str] = "markup"

    markup: str = ""


@dataclass
class TextField(FormElement):
    element_type: ClassVar[str] = "textfield"

    title: str = ""
    default_value: str | None = None
    required: bool = False
    description: str = ""


@dataclass
class SelectField(FormElement):
    element_type: ClassVar[str] = "select"

    title: str = ""
    options: dict[str, str] = field(default_factory=dict)
    default_value: str | None = None
    required: bool = False


@dataclass
class CheckboxField(FormElement):
    element_type: ClassVar[str] = "checkbox"

    title: str = ""
    default_value: bool = False


@dataclass
class UploadField(FormElement):
    """
    File upload element.

    Attributes:
        validators: Validator name -> argument list, resolved against
            media.validators.UPLOAD_VALIDATORS when the form is validated.
        value: Ids of files uploaded so far.
    """

    element_type: ClassVar[str] = "upload"

    title: str = ""
    multiple: bool = True
    upload_location: str = ""
    validators: dict[str, list[Any]] = field(default_factory=dict)
    value: list[str] = field(default_factory=list)


@dataclass
class SubmitButton(FormElement):
    element_type: ClassVar[str] = "submit"

    value: str = ""
    main_submit: bool = False


class Form(dict):
    """Ordered mapping of element name to FormElement."""

    def to_dict(self) -> dict[str, dict[str, Any]]:
        return {name: element.to_dict() for name, element in self.items()}


@dataclass
class FormState:
    """
    Submitted values and per-request state of a widget form.

    Attributes:
        values: Submitted values keyed by element name.
        triggering_element: The button that submitted the form, if any.
        errors: Element name -> error messages.
        selected_entities: Entities the widget has handed to the browser.
    """

    values: dict[str, Any] = field(default_factory=dict)
    triggering_element: FormElement | None = None
    errors: dict[str, list[str]] = field(default_factory=dict)
    selected_entities: list[Any] = field(default_factory=list)

    def get_value(self, name: str, default: Any = None) -> Any:
        return self.values.get(name, default)

    def set_value(self, name: str, value: Any) -> None:
        self.values[name] = value

    def unset_value(self, name: str) -> None:
        self.values.pop(name, None)

    def set_error(self, name: str, message: str) -> None:
        self.errors.setdefault(name, []).append(message)

    def has_errors(self) -> bool:
        return bool(self.errors)
