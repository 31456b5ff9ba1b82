"""The settings.xml part of a text document."""

from __future__ import annotations

from typing import Union

_Value = Union[bool, int, str]
_Entry = Union[tuple[str, _Value], tuple[str, _Value, str]]

_OFFICE_NS = "urn:oasis:names:tc:opendocument:xmlns:office:1.0"
_CONFIG_NS = "urn:oasis:names:tc:opendocument:xmlns:config:1.0"

# Entries are (name, value) or (name, value, config type). Booleans and
# strings carry their type implicitly.
_VIEW_AREA: tuple[_Entry, ...] = (
    ("ViewAreaTop", 0, "long"),
    ("ViewAreaLeft", 0, "long"),
    ("ViewAreaWidth", 66439, "long"),
    ("ViewAreaHeight", 32466, "long"),
    ("ShowRedlineChanges", True),
    ("InBrowseMode", False),
)

_VIEW: tuple[_Entry, ...] = (
    ("ViewId", "view2"),
    ("ViewLeft", 25307, "long"),
    ("ViewTop", 2501, "long"),
    ("VisibleLeft", 0, "long"),
    ("VisibleTop", 0, "long"),
    ("VisibleRight", 66437, "long"),
    ("VisibleBottom", 32464, "long"),
    ("ZoomType", 0, "short"),
    ("ViewLayoutColumns", 1, "short"),
    ("ViewLayoutBookMode", False),
    ("ZoomFactor", 100, "short"),
    ("IsSelectedFrame", False),
    ("KeepRatio", False),
    ("AnchoredTextOverflowLegacy", False),
    ("LegacySingleLineFontwork", False),
    ("ConnectorUseSnapRect", False),
    ("IgnoreBreakAfterMultilineField", False),
)

_CONFIGURATION: tuple[_Entry, ...] = (
    ("ProtectForm", False),
    ("PrinterName", ""),
    ("EmbeddedDatabaseName", ""),
    ("CurrentDatabaseDataSource", ""),
    ("LinkUpdateMode", 1, "short"),
    ("AddParaTableSpacingAtStart", True),
    ("UnbreakableNumberings", False),
    ("FieldAutoUpdate", True),
    ("AddVerticalFrameOffsets", False),
    ("AddParaTableSpacing", True),
    ("ChartAutoUpdate", True),
    ("CurrentDatabaseCommand", ""),
    ("PrinterSetup", "", "base64Binary"),
    ("AlignTabStopPosition", True),
    ("PrinterPaperFromSetup", False),
    ("IsKernAsianPunctuation", False),
    ("CharacterCompressionType", 0, "short"),
    ("ApplyUserData", True),
    ("DoNotJustifyLinesWithManualBreak", False),
    ("SaveThumbnail", True),
    ("SaveGlobalDocumentLinks", False),
    ("SmallCapsPercentage66", False),
    ("CurrentDatabaseCommandType", 0, "int"),
    ("SaveVersionOnClose", False),
    ("UpdateFromTemplate", True),
    ("DoNotCaptureDrawObjsOnPage", False),
    ("UseFormerObjectPositioning", False),
    ("EmbedSystemFonts", False),
    ("PrinterIndependentLayout", "high-resolution"),
    ("IsLabelDocument", False),
    ("AddFrameOffsets", False),
    ("AddExternalLeading", True),
    ("MsWordCompMinLineHeightByFly", False),
    ("UseOldNumbering", False),
    ("OutlineLevelYieldsNumbering", False),
    ("DoNotResetParaAttrsForNumFont", False),
    ("IgnoreFirstLineIndentInNumbering", False),
    ("AllowPrintJobCancel", True),
    ("UseFormerLineSpacing", False),
    ("AddParaSpacingToTableCells", True),
    ("AddParaLineSpacingToTableCells", True),
    ("UseFormerTextWrapping", False),
    ("RedlineProtectionKey", "", "base64Binary"),
    ("ConsiderTextWrapOnObjPos", False),
    ("NoGapAfterNoteNumber", False),
    ("TableRowKeep", False),
    ("TabsRelativeToIndent", True),
    ("IgnoreTabsAndBlanksForLineCalculation", False),
    ("IgnoreHiddenCharsForLineCalculation", True),
    ("TabAtLeftIndentForParagraphsInList", False),
    ("Rsid", 1414294, "int"),
    ("RsidRoot", 1336284, "int"),
    ("LoadReadonly", False),
    ("ClipAsCharacterAnchoredWriterFlyFrames", False),
    ("UnxForceZeroExtLeading", False),
    ("UseOldPrinterMetrics", False),
    ("MsWordCompTrailingBlanks", False),
    ("MathBaselineAlignment", True),
    ("InvertBorderSpacing", False),
    ("CollapseEmptyCellPara", True),
    ("TabOverflow", True),
    ("StylesNoDefault", False),
    ("ClippedPictures", False),
    ("BackgroundParaOverDrawings", False),
    ("EmbedFonts", False),
    ("EmbedOnlyUsedFonts", False),
    ("EmbedLatinScriptFonts", True),
    ("EmbedAsianScriptFonts", True),
    ("EmptyDbFieldHidesPara", True),
    ("EmbedComplexScriptFonts", True),
    ("TabOverMargin", False),
    ("TabOverSpacing", False),
    ("TreatSingleColumnBreakAsPageBreak", False),
    ("SurroundTextWrapSmall", False),
    ("ApplyParagraphMarkFormatToNumbering", False),
    ("PropLineSpacingShrinksFirstLine", True),
    ("SubtractFlysAnchoredAtFlys", False),
    ("DisableOffPagePositioning", False),
    ("ContinuousEndnotes", False),
    ("ProtectBookmarks", False),
    ("ProtectFields", False),
    ("HyphenateURLs", False),
    ("HeaderSpacingBelowLastPara", False),
    ("FrameAutowidthWithMorePara", False),
    ("GutterAtTop", False),
    ("FootnoteInColumnToPageEnd", True),
    ("ImagePreferredDPI", 0, "int"),
    ("AutoFirstLineIndentDisregardLineSpace", True),
    ("JustifyLinesWithShrinking", False),
    ("NoNumberingShowFollowBy", False),
    ("DropCapPunctuation", True),
    ("UseVariableWidthNBSP", False),
    ("PrintBlackFonts", False),
    ("ApplyTextAttrToEmptyLineAtEndOfParagraph", False),
    ("ApplyParagraphMarkFormatToEmptyLineAtEndOfParagraph", False),
    ("PaintHellOverHeaderFooter", False),
    ("MinRowHeightInclBorder", False),
    ("MsWordCompGridMetrics", False),
    ("NoClippingWithWrapPolygon", False),
    ("PrintAnnotationMode", 0, "short"),
    ("PrintGraphics", True),
    ("PrintLeftPages", True),
    ("PrintControls", True),
    ("PrintPageBackground", True),
    ("PrintTextPlaceholder", False),
    ("PrintDrawings", True),
    ("PrintHiddenText", False),
    ("PrintProspect", False),
    ("PrintTables", True),
    ("PrintProspectRTL", False),
    ("PrintReversed", False),
    ("PrintRightPages", True),
    ("PrintFaxName", ""),
    ("PrintPaperFromSetup", False),
    ("PrintEmptyPages", True),
)


def _item(name: str, value: _Value, kind: str | None = None) -> str:
    if isinstance(value, bool):
        kind = kind or "boolean"
        text = "true" if value else "false"
    else:
        kind = kind or "string"
        text = str(value)
    opening = f'<config:config-item config:name="{name}" config:type="{kind}"'
    if not text:
        return opening + " />"
    return f"{opening}>{text}</config:config-item>"


def _items(entries: tuple[_Entry, ...]) -> str:
    return "\n".join(_item(*entry) for entry in entries)


def _item_set(name: str, body: str) -> str:
    return (
        f'<config:config-item-set config:name="{name}">\n'
        f"{body}\n"
        "</config:config-item-set>"
    )


def _render() -> str:
    views = (
        '<config:config-item-map-indexed config:name="Views">\n'
        "<config:config-item-map-entry>\n"
        f"{_items(_VIEW)}\n"
        "</config:config-item-map-entry>\n"
        "</config:config-item-map-indexed>"
    )
    view_settings = _item_set("ooo:view-settings", _items(_VIEW_AREA) + "\n" + views)
    configuration = _item_set("ooo:configuration-settings", _items(_CONFIGURATION))
    return "\n".join(
        [
            '<?xml version="1.0" encoding="UTF-8"?>',
            f'<office:document-settings xmlns:office="{_OFFICE_NS}"'
            ' xmlns:ooo="http://openoffice.org/2004/office"'
            ' xmlns:xlink="http://www.w3.org/1999/xlink"'
            f' xmlns:config="{_CONFIG_NS}" office:version="1.4">',
            "<office:settings>",
            view_settings,
            configuration,
            "</office:settings>",
            "</office:document-settings>",
        ]
    )


_SETTINGS_XML = _render()


class Settings:
    """Fixed view and configuration settings of a text document."""

    def generate(self) -> str:
        """Return the settings.xml document."""
        return _SETTINGS_XML