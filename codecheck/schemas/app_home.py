"""
Structural schemas for App Home web components (``s-*`` tags).

Resolved by tag-to-type mapping: ``<s-button>`` → ``Button`` → ``ButtonSchema``.
Every component also accepts the generic element attributes in
``BASE_ELEMENT_PROPERTIES``.
"""
from typing import Dict

_STRING: dict = {"type": "string"}
_BOOLEAN: dict = {"type": "boolean"}
_NUMBER: dict = {"type": "number"}
_HANDLER: dict = {"type": "string", "description": "Event handler (inline script or expression)"}


def _enum(*values: str) -> dict:
    return {"type": "string", "enum": list(values)}


_TONE = _enum("auto", "neutral", "info", "success", "caution", "warning", "critical")

BASE_ELEMENT_PROPERTIES: Dict[str, dict] = {
    "id": _STRING,
    "class": _STRING,
    "className": _STRING,
    "slot": _STRING,
    "key": _STRING,
    "ref": _STRING,
}


def _element(*required: str, **properties: dict) -> dict:
    schema = {
        "type": "object",
        "properties": {**BASE_ELEMENT_PROPERTIES, **properties},
    }
    if required:
        schema["required"] = list(required)
    return schema


# Tag name → logical type name
TAG_TO_TYPE_MAPPING: Dict[str, str] = {
    "s-badge": "Badge",
    "s-banner": "Banner",
    "s-box": "Box",
    "s-button": "Button",
    "s-checkbox": "Checkbox",
    "s-choice": "Choice",
    "s-choice-list": "ChoiceList",
    "s-clickable": "Clickable",
    "s-date-picker": "DatePicker",
    "s-divider": "Divider",
    "s-email-field": "EmailField",
    "s-grid": "Grid",
    "s-grid-item": "GridItem",
    "s-heading": "Heading",
    "s-icon": "Icon",
    "s-image": "Image",
    "s-link": "Link",
    "s-money-field": "MoneyField",
    "s-number-field": "NumberField",
    "s-option": "Option",
    "s-page": "Page",
    "s-paragraph": "Paragraph",
    "s-password-field": "PasswordField",
    "s-query-container": "QueryContainer",
    "s-search-field": "SearchField",
    "s-section": "Section",
    "s-select": "Select",
    "s-spinner": "Spinner",
    "s-stack": "Stack",
    "s-switch": "Switch",
    "s-table": "Table",
    "s-table-body": "TableBody",
    "s-table-cell": "TableCell",
    "s-table-header": "TableHeader",
    "s-table-header-row": "TableHeaderRow",
    "s-table-row": "TableRow",
    "s-text": "Text",
    "s-text-area": "TextArea",
    "s-text-field": "TextField",
    "s-url-field": "URLField",
}

_FIELD_PROPERTIES: Dict[str, dict] = {
    "label": _STRING,
    "labelAccessibilityVisibility": _enum("visible", "exclusive"),
    "name": _STRING,
    "value": _STRING,
    "defaultValue": _STRING,
    "placeholder": _STRING,
    "details": _STRING,
    "error": _STRING,
    "disabled": _BOOLEAN,
    "readOnly": _BOOLEAN,
    "required": _BOOLEAN,
    "autocomplete": _STRING,
    "onChange": _HANDLER,
    "onInput": _HANDLER,
    "onFocus": _HANDLER,
    "onBlur": _HANDLER,
}

_BOX_PROPERTIES: Dict[str, dict] = {
    "accessibilityLabel": _STRING,
    "accessibilityRole": _STRING,
    "accessibilityVisibility": _enum("visible", "hidden", "exclusive"),
    "background": _enum("transparent", "base", "subdued", "strong"),
    "blockSize": _STRING,
    "border": _STRING,
    "borderColor": _STRING,
    "borderRadius": _STRING,
    "borderStyle": _STRING,
    "borderWidth": _STRING,
    "display": _enum("auto", "none"),
    "inlineSize": _STRING,
    "maxBlockSize": _STRING,
    "maxInlineSize": _STRING,
    "minBlockSize": _STRING,
    "minInlineSize": _STRING,
    "overflow": _enum("visible", "hidden"),
    "padding": _STRING,
    "paddingBlock": _STRING,
    "paddingBlockEnd": _STRING,
    "paddingBlockStart": _STRING,
    "paddingInline": _STRING,
    "paddingInlineEnd": _STRING,
    "paddingInlineStart": _STRING,
}

SCHEMAS: Dict[str, dict] = {
    "BadgeSchema": _element(
        color=_enum("base", "strong"),
        icon=_STRING,
        size=_enum("base", "large", "large-100"),
        tone=_TONE,
    ),
    "BannerSchema": _element(
        dismissible=_BOOLEAN,
        heading=_STRING,
        hidden=_BOOLEAN,
        tone=_TONE,
        onDismiss=_HANDLER,
        onAfterHide=_HANDLER,
    ),
    "BoxSchema": _element(**_BOX_PROPERTIES),
    "ButtonSchema": _element(
        accessibilityLabel=_STRING,
        command=_enum("--auto", "--show", "--hide", "--toggle"),
        commandFor=_STRING,
        disabled=_BOOLEAN,
        download=_STRING,
        href=_STRING,
        icon=_STRING,
        loading=_BOOLEAN,
        target=_enum("auto", "_self", "_blank"),
        tone=_enum("auto", "neutral", "critical"),
        type=_enum("button", "submit", "reset"),
        variant=_enum("auto", "primary", "secondary", "tertiary"),
        onClick=_HANDLER,
        onclick=_HANDLER,
        onFocus=_HANDLER,
        onBlur=_HANDLER,
    ),
    "CheckboxSchema": _element(
        accessibilityLabel=_STRING,
        checked=_BOOLEAN,
        defaultChecked=_BOOLEAN,
        defaultIndeterminate=_BOOLEAN,
        details=_STRING,
        disabled=_BOOLEAN,
        error=_STRING,
        indeterminate=_BOOLEAN,
        label=_STRING,
        name=_STRING,
        required=_BOOLEAN,
        value=_STRING,
        onChange=_HANDLER,
        onInput=_HANDLER,
    ),
    "ChoiceSchema": _element(
        accessibilityLabel=_STRING,
        defaultSelected=_BOOLEAN,
        disabled=_BOOLEAN,
        selected=_BOOLEAN,
        value=_STRING,
    ),
    "ChoiceListSchema": _element(
        details=_STRING,
        disabled=_BOOLEAN,
        error=_STRING,
        label=_STRING,
        labelAccessibilityVisibility=_enum("visible", "exclusive"),
        multiple=_BOOLEAN,
        name=_STRING,
        values={"type": "array", "items": _STRING},
        onChange=_HANDLER,
        onInput=_HANDLER,
    ),
    "ClickableSchema": _element(
        **_BOX_PROPERTIES,
        command=_enum("--auto", "--show", "--hide", "--toggle"),
        commandFor=_STRING,
        disabled=_BOOLEAN,
        download=_STRING,
        href=_STRING,
        loading=_BOOLEAN,
        target=_enum("auto", "_self", "_blank"),
        type=_enum("button", "submit", "reset"),
        onClick=_HANDLER,
    ),
    "DatePickerSchema": _element(
        allow=_STRING,
        allowDays=_STRING,
        defaultValue=_STRING,
        defaultView=_STRING,
        disallow=_STRING,
        disallowDays=_STRING,
        name=_STRING,
        type=_STRING,
        value=_STRING,
        view=_STRING,
        onBlur=_HANDLER,
        onChange=_HANDLER,
        onFocus=_HANDLER,
        onInput=_HANDLER,
        onViewChange=_HANDLER,
    ),
    "DividerSchema": _element(
        color=_enum("base", "strong"),
        direction=_enum("inline", "block"),
    ),
    "EmailFieldSchema": _element(**_FIELD_PROPERTIES, maxLength=_NUMBER, minLength=_NUMBER),
    "GridSchema": _element(
        **_BOX_PROPERTIES,
        alignContent=_STRING,
        alignItems=_STRING,
        columnGap=_STRING,
        gap=_STRING,
        gridTemplateColumns=_STRING,
        gridTemplateRows=_STRING,
        justifyContent=_STRING,
        justifyItems=_STRING,
        placeContent=_STRING,
        placeItems=_STRING,
        rowGap=_STRING,
    ),
    "GridItemSchema": _element(
        **_BOX_PROPERTIES,
        gridColumn=_STRING,
        gridRow=_STRING,
    ),
    "HeadingSchema": _element(
        accessibilityRole=_enum("heading", "presentation", "none"),
        accessibilityVisibility=_enum("visible", "hidden", "exclusive"),
        lineClamp=_NUMBER,
    ),
    "IconSchema": _element(
        color=_enum("base", "subdued"),
        interestFor=_STRING,
        size=_enum("small", "base"),
        tone=_TONE,
        type=_STRING,
    ),
    "ImageSchema": _element(
        accessibilityRole=_enum("img", "presentation", "none"),
        alt=_STRING,
        aspectRatio=_STRING,
        border=_STRING,
        borderRadius=_STRING,
        inlineSize=_enum("auto", "fill"),
        loading=_enum("eager", "lazy"),
        objectFit=_enum("contain", "cover"),
        sizes=_STRING,
        src=_STRING,
        srcSet=_STRING,
        onLoad=_HANDLER,
        onError=_HANDLER,
    ),
    "LinkSchema": _element(
        accessibilityLabel=_STRING,
        command=_enum("--auto", "--show", "--hide", "--toggle"),
        commandFor=_STRING,
        download=_STRING,
        href=_STRING,
        lang=_STRING,
        target=_enum("auto", "_self", "_blank"),
        tone=_enum("auto", "neutral", "critical"),
        onClick=_HANDLER,
    ),
    "MoneyFieldSchema": _element(**_FIELD_PROPERTIES, max=_NUMBER, min=_NUMBER),
    "NumberFieldSchema": _element(
        **_FIELD_PROPERTIES,
        inputMode=_enum("decimal", "numeric"),
        max=_NUMBER,
        min=_NUMBER,
        step=_NUMBER,
        prefix=_STRING,
        suffix=_STRING,
    ),
    "OptionSchema": _element(
        defaultSelected=_BOOLEAN,
        disabled=_BOOLEAN,
        selected=_BOOLEAN,
        value=_STRING,
    ),
    "PageSchema": _element(
        heading=_STRING,
        inlineSize=_enum("small", "base", "large"),
    ),
    "ParagraphSchema": _element(
        accessibilityVisibility=_enum("visible", "hidden", "exclusive"),
        color=_enum("base", "subdued"),
        dir=_enum("ltr", "rtl", "auto", ""),
        fontVariantNumeric=_enum("auto", "normal", "tabular-nums"),
        lineClamp=_NUMBER,
        tone=_TONE,
    ),
    "PasswordFieldSchema": _element(**_FIELD_PROPERTIES, maxLength=_NUMBER, minLength=_NUMBER),
    "QueryContainerSchema": _element(containerName=_STRING),
    "SearchFieldSchema": _element(**_FIELD_PROPERTIES, maxLength=_NUMBER, minLength=_NUMBER),
    "SectionSchema": _element(
        accessibilityLabel=_STRING,
        heading=_STRING,
        padding=_enum("base", "none"),
    ),
    "SelectSchema": _element(
        **{k: v for k, v in _FIELD_PROPERTIES.items() if k not in ("onInput", "readOnly")},
        icon=_STRING,
    ),
    "SpinnerSchema": _element(
        accessibilityLabel=_STRING,
        size=_enum("base", "large", "large-100"),
    ),
    "StackSchema": _element(
        **_BOX_PROPERTIES,
        alignContent=_STRING,
        alignItems=_STRING,
        columnGap=_STRING,
        direction=_enum("inline", "block"),
        gap=_STRING,
        justifyContent=_STRING,
        rowGap=_STRING,
    ),
    "SwitchSchema": _element(
        accessibilityLabel=_STRING,
        checked=_BOOLEAN,
        defaultChecked=_BOOLEAN,
        details=_STRING,
        disabled=_BOOLEAN,
        error=_STRING,
        label=_STRING,
        labelAccessibilityVisibility=_enum("visible", "exclusive"),
        name=_STRING,
        required=_BOOLEAN,
        value=_STRING,
        onChange=_HANDLER,
        onInput=_HANDLER,
    ),
    "TableSchema": _element(
        hasNextPage=_BOOLEAN,
        hasPreviousPage=_BOOLEAN,
        loading=_BOOLEAN,
        paginate=_BOOLEAN,
        variant=_enum("auto", "list"),
        onNextPage=_HANDLER,
        onPreviousPage=_HANDLER,
    ),
    "TableBodySchema": _element(),
    "TableCellSchema": _element(),
    "TableHeaderSchema": _element(
        format=_enum("base", "numeric", "currency"),
        listSlot=_enum("primary", "secondary", "kicker", "inline", "labeled"),
    ),
    "TableHeaderRowSchema": _element(),
    "TableRowSchema": _element(clickDelegate=_STRING),
    "TextSchema": _element(
        accessibilityVisibility=_enum("visible", "hidden", "exclusive"),
        color=_enum("base", "subdued"),
        dir=_enum("ltr", "rtl", "auto", ""),
        fontVariantNumeric=_enum("auto", "normal", "tabular-nums"),
        interestFor=_STRING,
        tone=_TONE,
        type=_enum("address", "redundant", "mark", "emphasis", "offset", "strong", "small", "generic"),
    ),
    "TextAreaSchema": _element(**_FIELD_PROPERTIES, maxLength=_NUMBER, minLength=_NUMBER, rows=_NUMBER),
    "TextFieldSchema": _element(
        **_FIELD_PROPERTIES,
        icon=_STRING,
        maxLength=_NUMBER,
        minLength=_NUMBER,
        prefix=_STRING,
        suffix=_STRING,
    ),
    "URLFieldSchema": _element(**_FIELD_PROPERTIES, maxLength=_NUMBER, minLength=_NUMBER),
}
