"""Configuration resolution: project .swift-format or the bundled fallback.

The project's own ``.swift-format`` always wins. When it is absent the embedded
default below is written to the plugin work directory and that path is passed
to swift-format instead.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any

from swift_format_plugin import diagnostics

CONFIG_FILE_NAME = ".swift-format"
FALLBACK_CONFIG_NAME = "swift-format-fallback.json"


class ConfigurationError(ValueError):
    """Raised when a configuration document or settings file cannot be used."""


# Downstream projects override this by placing their own .swift-format in the project root.
FALLBACK_CONFIG_JSON = """\
{
  "fileScopedDeclarationPrivacy": {
    "accessLevel": "private"
  },
  "indentConditionalCompilationBlocks": true,
  "indentSwitchCaseLabels": false,
  "indentation": {
    "spaces": 4
  },
  "lineBreakAroundMultilineExpressionChainComponents": false,
  "lineBreakBeforeControlFlowKeywords": false,
  "lineBreakBeforeEachArgument": true,
  "lineBreakBeforeEachGenericRequirement": false,
  "lineBreakBetweenDeclarationAttributes": false,
  "lineLength": 120,
  "maximumBlankLines": 1,
  "multiElementCollectionTrailingCommas": true,
  "noAssignmentInExpressions": {
    "allowedFunctions": [
      "XCTAssertNoThrow"
    ]
  },
  "prioritizeKeepingFunctionOutputTogether": true,
  "reflowMultilineStringLiterals": "never",
  "respectsExistingLineBreaks": true,
  "rules": {
    "AllPublicDeclarationsHaveDocumentation": true,
    "AlwaysUseLiteralForEmptyCollectionInit": false,
    "AlwaysUseLowerCamelCase": true,
    "AmbiguousTrailingClosureOverload": true,
    "AvoidRetroactiveConformances": true,
    "BeginDocumentationCommentWithOneLineSummary": false,
    "DoNotUseSemicolons": true,
    "DontRepeatTypeInStaticProperties": true,
    "FileScopedDeclarationPrivacy": true,
    "FullyIndirectEnum": true,
    "GroupNumericLiterals": true,
    "IdentifiersMustBeASCII": true,
    "NeverForceUnwrap": true,
    "NeverUseForceTry": true,
    "NeverUseImplicitlyUnwrappedOptionals": true,
    "NoAccessLevelOnExtensionDeclaration": true,
    "NoAssignmentInExpressions": true,
    "NoBlockComments": true,
    "NoCasesWithOnlyFallthrough": true,
    "NoEmptyLinesOpeningClosingBraces": true,
    "NoEmptyTrailingClosureParentheses": true,
    "NoLabelsInCasePatterns": true,
    "NoLeadingUnderscores": true,
    "NoParensAroundConditions": true,
    "NoPlaygroundLiterals": true,
    "NoVoidReturnOnFunctionSignature": true,
    "OmitExplicitReturns": true,
    "OneCasePerLine": true,
    "OneVariableDeclarationPerLine": true,
    "OnlyOneTrailingClosureArgument": true,
    "OrderedImports": true,
    "ReplaceForEachWithForLoop": true,
    "ReturnVoidInsteadOfEmptyTuple": true,
    "TypeNamesShouldBeCapitalized": true,
    "UseEarlyExits": false,
    "UseExplicitNilCheckInConditions": true,
    "UseLetInEveryBoundCaseVariable": true,
    "UseShorthandTypeNames": true,
    "UseSingleLinePropertyGetter": true,
    "UseSynthesizedInitializer": true,
    "UseTripleSlashForDocumentationComments": true,
    "UseWhereClausesInForLoops": true,
    "ValidateDocumentationComments": false
  },
  "spacesAroundRangeFormationOperators": false,
  "spacesBeforeEndOfLineComments": 2,
  "tabWidth": 4,
  "version": 1
}"""


def _write_atomically(path: Path, text: str) -> None:
    """Write text to path via a temp file in the same directory, then rename over it."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        # mkstemp creates 0600; match a plain write under the current umask.
        umask = os.umask(0)
        os.umask(umask)
        os.chmod(tmp_name, 0o666 & ~umask)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def resolve_configuration(
    project_root: Path,
    work_dir: Path,
    *,
    config_file_name: str = CONFIG_FILE_NAME,
    fallback_config_name: str = FALLBACK_CONFIG_NAME,
) -> str:
    """Return the configuration path to hand to swift-format.

    Uses ``project_root/.swift-format`` verbatim when it exists. Otherwise writes
    FALLBACK_CONFIG_JSON to ``work_dir/swift-format-fallback.json`` and returns that.
    OSError from the fallback write propagates.
    """
    project_config = Path(project_root) / config_file_name
    if project_config.exists():
        diagnostics.remark(f"Using project configuration at {project_config}.")
        return str(project_config)

    fallback = Path(work_dir) / fallback_config_name
    _write_atomically(fallback, FALLBACK_CONFIG_JSON)
    diagnostics.remark(
        f"No {config_file_name} found in project root; using bundled fallback configuration."
    )
    return str(fallback)


def load_configuration(path: Path) -> dict[str, Any]:
    """Parse a swift-format configuration document. Raises ConfigurationError if unusable."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        msg = f"Invalid JSON in {path}: {e}"
        raise ConfigurationError(msg) from e
    if not isinstance(data, dict):
        msg = f"Configuration {path} must be a JSON object"
        raise ConfigurationError(msg)
    return data
