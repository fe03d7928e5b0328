"""
System Font Provider
===================

Provider for system fonts available on the local machine.
Finds font files by name in standard system locations and, where available,
asks the platform font database for a family.
"""

import logging
import os
import platform
import shutil
import subprocess
from collections.abc import Iterable
from pathlib import Path

# Optional Windows dependency
try:
    import winreg
except ImportError:
    winreg = None

logger = logging.getLogger(__name__)

FONT_EXTENSIONS = {".ttf", ".otf", ".ttc", ".otc"}


class SystemFontProvider:
    """
    Provider for system fonts available on the local machine.

    Builds a file-name index over the system font directories the first time a
    lookup needs it. Directories listed earlier win when two hold a file with
    the same name.
    """

    def __init__(
        self,
        extra_dirs: Iterable[Path] = (),
        use_fontconfig: bool = True,
        fontconfig_timeout: float = 5.0,
        system: str | None = None,
    ):
        """
        Initialize system font provider.

        Args:
            extra_dirs: Directories searched before the platform directories
            use_fontconfig: Whether to ask ``fc-match`` for families on Linux
            fontconfig_timeout: Timeout for ``fc-match`` in seconds
            system: Override of ``platform.system()``, lower-cased
        """
        self.system = (system or platform.system()).lower()
        self.use_fontconfig = use_fontconfig
        self.fontconfig_timeout = fontconfig_timeout
        self.font_directories = [Path(d) for d in extra_dirs] + self._get_system_font_directories()
        self._index: dict[str, Path] | None = None

        logger.debug(f"SystemFontProvider initialized for {self.system}")
        logger.debug(f"Font directories: {self.font_directories}")

    def _get_system_font_directories(self) -> list[Path]:
        """Get system font directories based on operating system."""
        directories = []

        if self.system == "windows":
            directories.append(Path(os.environ.get("WINDIR", "C:\\Windows")) / "Fonts")
            # Per-user fonts, only when LOCALAPPDATA is set
            local_app_data = os.environ.get("LOCALAPPDATA")
            if local_app_data:
                directories.append(Path(local_app_data) / "Microsoft" / "Windows" / "Fonts")

        elif self.system == "darwin":
            directories.extend(
                [
                    Path("/System/Library/Fonts"),
                    Path("/System/Library/Fonts/Supplemental"),
                    Path("/Library/Fonts"),
                    Path.home() / "Library" / "Fonts",
                ]
            )

        else:  # Linux and other Unix-like systems
            directories.extend(
                [
                    Path("/usr/share/fonts"),
                    Path("/usr/local/share/fonts"),
                    Path.home() / ".fonts",
                    Path.home() / ".local" / "share" / "fonts",
                ]
            )

        return directories

    @property
    def index(self) -> dict[str, Path]:
        """Lower-cased file name to path, built on first use."""
        if self._index is None:
            self._index = self._build_index()
        return self._index

    def refresh(self) -> None:
        """Drop the file-name index so the next lookup rescans."""
        self._index = None

    def _build_index(self) -> dict[str, Path]:
        index: dict[str, Path] = {}
        for font_dir in self.font_directories:
            if not font_dir.is_dir():
                continue
            for font_file in self._scan_font_directory(font_dir):
                index.setdefault(font_file.name.lower(), font_file)
        logger.debug(f"Indexed {len(index)} system font files")
        return index

    def _scan_font_directory(self, font_dir: Path) -> list[Path]:
        """Scan a font directory for font files."""
        found = []
        try:
            for font_file in sorted(font_dir.rglob("*")):
                if font_file.suffix.lower() in FONT_EXTENSIONS and font_file.is_file():
                    found.append(font_file)
        except PermissionError:
            logger.debug(f"Permission denied accessing {font_dir}")
        except OSError as e:
            logger.warning(f"Error scanning {font_dir}: {e}")
        return found

    def list_fonts(self) -> list[Path]:
        """List all indexed system font files."""
        return list(self.index.values())

    def find_file(self, file_names: Iterable[str]) -> Path | None:
        """
        Find the first of ``file_names`` present in the system font directories.

        Args:
            file_names: Candidate file names in preference order

        Returns:
            Path of the first file found, None otherwise
        """
        for name in file_names:
            path = self.index.get(name.lower())
            if path is not None:
                return path
        return None

    def find_family(self, family: str, style: str = "Regular") -> Path | None:
        """
        Ask the platform font database for a family.

        Args:
            family: Font family name
            style: Font style name

        Returns:
            Path of the font file if the platform knows the family, None otherwise
        """
        if self.system == "windows":
            return self._find_windows_font(family)
        if self.system == "darwin":
            return None
        return self._find_linux_font(family, style)

    def _find_windows_font(self, family: str) -> Path | None:
        """Find font on Windows using registry."""
        if winreg is None:
            return None

        try:
            font_key = winreg.OpenKey(
                winreg.HKEY_LOCAL_MACHINE,
                r"SOFTWARE\Microsoft\Windows NT\CurrentVersion\Fonts",
            )
        except OSError as e:
            logger.debug(f"Failed to open Windows font registry: {e}")
            return None

        try:
            index = 0
            while True:
                try:
                    value_name, value_data, _ = winreg.EnumValue(font_key, index)
                except OSError:
                    break
                index += 1

                if not value_name.lower().startswith(family.lower()):
                    continue

                font_path = Path(value_data)
                if not font_path.is_absolute():
                    font_path = Path(os.environ.get("WINDIR", "C:\\Windows")) / "Fonts" / font_path
                if font_path.exists():
                    return font_path
        finally:
            winreg.CloseKey(font_key)

        return None

    def _find_linux_font(self, family: str, style: str) -> Path | None:
        """Find font on Linux using fontconfig."""
        if not self.use_fontconfig:
            return None

        fc_match_path = shutil.which("fc-match")
        if not fc_match_path:
            logger.debug("fc-match not found in PATH")
            return None

        try:
            result = subprocess.run(
                [fc_match_path, f"{family}:style={style}", "--format=%{family}\n%{file}"],
                capture_output=True,
                text=True,
                timeout=self.fontconfig_timeout,
                check=False,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            logger.debug(f"fc-match failed for {family}: {e}")
            return None

        if result.returncode != 0:
            return None

        matched_families, _, font_file = result.stdout.strip().partition("\n")
        # fc-match always answers with its closest font; only accept the family asked for
        names = [name.strip().lower() for name in matched_families.split(",")]
        if family.lower() not in names:
            logger.debug(f"fc-match substituted {matched_families!r} for {family}")
            return None

        font_path = Path(font_file.strip())
        if font_file.strip() and font_path.exists():
            return font_path
        return None

    def get_system_font_info(self) -> dict[str, object]:
        """Get system font information."""
        return {
            "system": self.system,
            "font_directories": [str(d) for d in self.font_directories],
            "existing_directories": [str(d) for d in self.font_directories if d.is_dir()],
            "total_system_fonts": len(self.index),
        }
