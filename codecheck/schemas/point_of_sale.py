"""
Structural schemas for Point of Sale UI extension components.

Resolved by conventional naming: a tag ``Button`` is looked up as
``ButtonPropsSchema`` first, then ``ButtonSchema``.
"""
from typing import Dict

_STRING: dict = {"type": "string"}
_BOOLEAN: dict = {"type": "boolean"}
_NUMBER: dict = {"type": "number"}
_CALLBACK: dict = {"description": "Callback; only its presence can be checked"}


def _enum(*values: str) -> dict:
    return {"type": "string", "enum": list(values)}


def _props(*required: str, **properties: dict) -> dict:
    schema = {"type": "object", "properties": properties}
    if required:
        schema["required"] = list(required)
    return schema


_FIELD_PROPERTIES: Dict[str, dict] = {
    "label": _STRING,
    "value": _STRING,
    "placeholder": _STRING,
    "helpText": _STRING,
    "error": _STRING,
    "disabled": _BOOLEAN,
    "required": _BOOLEAN,
    "action": _STRING,
    "onChange": _CALLBACK,
    "onInput": _CALLBACK,
    "onFocus": _CALLBACK,
    "onBlur": _CALLBACK,
}

SCHEMAS: Dict[str, dict] = {
    "BadgePropsSchema": _props(
        "text", "variant",
        status=_enum("empty", "partial", "complete"),
        text=_STRING,
        variant=_enum("neutral", "critical", "warning", "success", "highlight"),
    ),
    "BannerPropsSchema": _props(
        "title", "variant", "visible",
        action=_STRING,
        hideAction=_BOOLEAN,
        onPress=_CALLBACK,
        title=_STRING,
        variant=_enum("confirmation", "alert", "error", "information"),
        visible=_BOOLEAN,
    ),
    "BoxPropsSchema": _props(
        blockSize=_STRING,
        inlineSize=_STRING,
        maxBlockSize=_STRING,
        maxInlineSize=_STRING,
        minBlockSize=_STRING,
        minInlineSize=_STRING,
        padding=_STRING,
        paddingBlock=_STRING,
        paddingInline=_STRING,
    ),
    "ButtonPropsSchema": _props(
        isDisabled=_BOOLEAN,
        isLoading=_BOOLEAN,
        onPress=_CALLBACK,
        title=_STRING,
        type=_enum("primary", "basic", "destructive", "plain"),
    ),
    "CameraScannerPropsSchema": _props(
        bannerProps={
            "type": "object",
            "properties": {"title": _STRING, "variant": _STRING, "visible": _BOOLEAN},
        },
    ),
    "CameraScannerBannerPropsSchema": _props(
        "title", "variant", "visible",
        title=_STRING,
        variant=_enum("confirmation", "alert", "error", "information"),
        visible=_BOOLEAN,
    ),
    "DateFieldPropsSchema": _props(
        "label",
        action=_STRING,
        disabled=_BOOLEAN,
        error=_STRING,
        helpText=_STRING,
        label=_STRING,
        onBlur=_CALLBACK,
        onChange=_CALLBACK,
        onFocus=_CALLBACK,
        value=_STRING,
    ),
    "DatePickerPropsSchema": _props(
        inputMode=_enum("inline", "spinner"),
        onChange=_CALLBACK,
        selected=_STRING,
        visibleState={"type": "array"},
    ),
    "DialogPropsSchema": _props(
        "title", "actionText", "isVisible",
        actionText=_STRING,
        content=_STRING,
        isVisible=_BOOLEAN,
        onAction=_CALLBACK,
        onSecondaryAction=_CALLBACK,
        secondaryActionText=_STRING,
        showSecondaryAction=_BOOLEAN,
        title=_STRING,
        type=_enum("default", "alert", "destructive", "error"),
    ),
    "EmailFieldPropsSchema": _props("label", **_FIELD_PROPERTIES),
    "IconPropsSchema": _props(
        "name",
        name=_STRING,
        size=_enum("s", "m", "l", "minor", "major", "spot", "caption", "badge"),
        tone=_enum("icon-primary", "icon-subdued", "icon-critical", "icon-warning", "icon-success", "icon-interactive"),
    ),
    "ImagePropsSchema": _props(
        size=_enum("s", "m", "l", "xl"),
        src=_STRING,
    ),
    "ListPropsSchema": _props(
        "data",
        data={"type": "array"},
        imageDisplayStrategy=_enum("automatic", "always", "never"),
        isLoadingMore=_BOOLEAN,
        listHeaderComponent=_CALLBACK,
        onEndReached=_CALLBACK,
        title=_STRING,
    ),
    "NavigatorPropsSchema": _props(
        initialScreenName=_STRING,
    ),
    "NewTextFieldPropsSchema": _props("label", **_FIELD_PROPERTIES, maxLength=_NUMBER),
    "NumberFieldPropsSchema": _props(
        "label",
        **_FIELD_PROPERTIES,
        inputMode=_enum("decimal", "numeric"),
        max=_NUMBER,
        maxLength=_NUMBER,
        min=_NUMBER,
    ),
    "POSBlockPropsSchema": _props(
        action={"type": "object", "properties": {"title": _STRING, "disabled": _BOOLEAN, "onPress": _CALLBACK}},
    ),
    "POSBlockRowPropsSchema": _props(
        onPress=_CALLBACK,
    ),
    "PinPadPropsSchema": _props(
        "onSubmit",
        label=_STRING,
        masked=_BOOLEAN,
        maxPinLength=_NUMBER,
        minPinLength=_NUMBER,
        onPinEntry=_CALLBACK,
        onSubmit=_CALLBACK,
        pinPadAction=_STRING,
    ),
    "PrintPreviewPropsSchema": _props(
        "src",
        src=_STRING,
    ),
    "QRCodePropsSchema": _props(
        "value",
        value=_STRING,
    ),
    "RadioButtonListPropsSchema": _props(
        "items", "onItemSelected",
        initialOffsetToShowSelectedItem=_BOOLEAN,
        initialSelectedItem=_STRING,
        items={"type": "array", "items": _STRING},
        onItemSelected=_CALLBACK,
    ),
    "ScreenPropsSchema": _props(
        "name", "title",
        isLoading=_BOOLEAN,
        name=_STRING,
        onNavigate=_CALLBACK,
        onNavigateBack=_CALLBACK,
        onReceiveParams=_CALLBACK,
        overrideNavigateBack=_CALLBACK,
        presentation={"type": "object", "properties": {"sheet": _BOOLEAN}},
        secondaryAction={"type": "object", "properties": {"text": _STRING, "onPress": _CALLBACK, "isEnabled": _BOOLEAN}},
        title=_STRING,
    ),
    "ScreenPresentationPropsSchema": _props(
        sheet=_BOOLEAN,
    ),
    "ScrollViewPropsSchema": _props(),
    "SearchBarPropsSchema": _props(
        editable=_BOOLEAN,
        initialValue=_STRING,
        onFocus=_CALLBACK,
        onSearch=_CALLBACK,
        onTextChange=_CALLBACK,
        placeholder=_STRING,
    ),
    "SectionPropsSchema": _props(
        action={"type": "object", "properties": {"title": _STRING, "onPress": _CALLBACK}},
        title=_STRING,
    ),
    "SectionHeaderPropsSchema": _props(
        "title",
        action={"type": "object", "properties": {"label": _STRING, "onPress": _CALLBACK, "disabled": _BOOLEAN}},
        hideDivider=_BOOLEAN,
        title=_STRING,
    ),
    "SecondaryActionPropsSchema": _props(
        "text", "onPress",
        isEnabled=_BOOLEAN,
        onPress=_CALLBACK,
        text=_STRING,
    ),
    "SegmentedControlPropsSchema": _props(
        "segments", "selected", "onSelect",
        onSelect=_CALLBACK,
        segments={"type": "array"},
        selected=_STRING,
    ),
    "SelectablePropsSchema": _props(
        disabled=_BOOLEAN,
        onPress=_CALLBACK,
    ),
    "StackPropsSchema": _props(
        alignContent=_enum("stretch"),
        alignItems=_enum("stretch", "baseline", "center", "flex-start", "flex-end"),
        blockSize=_STRING,
        columnGap=_STRING,
        direction=_enum("inline", "block", "vertical", "horizontal"),
        flex=_NUMBER,
        flexChildren=_BOOLEAN,
        flexWrap=_enum("wrap", "nowrap", "wrap-reverse"),
        gap=_STRING,
        inlineSize=_STRING,
        justifyContent=_STRING,
        padding=_STRING,
        paddingBlock=_STRING,
        paddingHorizontal=_STRING,
        paddingInline=_STRING,
        paddingVertical=_STRING,
        rowGap=_STRING,
        spacing=_STRING,
    ),
    "StepperPropsSchema": _props(
        "initialValue", "onValueChanged",
        disabled=_BOOLEAN,
        initialValue=_NUMBER,
        maximumValue=_NUMBER,
        minimumValue=_NUMBER,
        onValueChanged=_CALLBACK,
        value=_NUMBER,
    ),
    "TextPropsSchema": _props(
        color=_STRING,
        variant=_enum(
            "body", "bodyLg", "bodyMd", "bodySm", "captionMedium", "captionRegular",
            "captionRegularTall", "display", "headingLarge", "headingSmall", "sectionHeader",
        ),
    ),
    "TextAreaPropsSchema": _props("label", **_FIELD_PROPERTIES, initialLines=_NUMBER, maxLength=_NUMBER),
    "TextFieldPropsSchema": _props("label", **_FIELD_PROPERTIES, maxLength=_NUMBER),
    "TilePropsSchema": _props(
        "title",
        badgeValue=_NUMBER,
        destructive=_BOOLEAN,
        enabled=_BOOLEAN,
        onPress=_CALLBACK,
        subtitle=_STRING,
        title=_STRING,
    ),
    "TimeFieldPropsSchema": _props(
        "label",
        action=_STRING,
        disabled=_BOOLEAN,
        error=_STRING,
        helpText=_STRING,
        is24Hour=_BOOLEAN,
        label=_STRING,
        onBlur=_CALLBACK,
        onChange=_CALLBACK,
        onFocus=_CALLBACK,
        value=_STRING,
    ),
    "TimePickerPropsSchema": _props(
        "visibleState",
        inputMode=_enum("inline", "spinner"),
        is24Hour=_BOOLEAN,
        onChange=_CALLBACK,
        selected=_STRING,
        visibleState={"type": "array"},
    ),
    "ToggleSwitchSchema": _props(
        disabled=_BOOLEAN,
        value=_BOOLEAN,
    ),
}
