"""
설정 모듈 - sshx 설정 파일(~/.sshx/config) 로드 및 경로 관리

설정 파일 형식 (한 줄에 하나의 지시어, 키워드는 대소문자 무시):
    NamespaceSeparator .
    EnableAlias true
    SshPath /usr/bin/ssh
    TemporaryConfigPath /tmp/sshx_config    # 선택

구현 방식:
- 줄 단위 정규식 매칭 (인식하지 못한 줄은 무시)
- 값은 키워드 뒤 첫 번째 토큰만 사용
- 값 검증은 하지 않음 (구분자가 여러 글자여도 그대로 사용)
"""

import re
import shutil
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Iterable, Optional


PRIVATE_DIR_NAME = ".sshx"
SETTINGS_FILE_NAME = "config"
IMPORTED_CONFIG_NAME = "ssh_config"

_SEPARATOR_RE = re.compile(r"NamespaceSeparator\s+(\S+)", re.IGNORECASE)
_ENABLE_ALIAS_RE = re.compile(r"EnableAlias\s+(\S+)", re.IGNORECASE)
_SSH_PATH_RE = re.compile(r"SshPath\s+(\S+)", re.IGNORECASE)
_TEMPORARY_PATH_RE = re.compile(r"TemporaryConfigPath\s+(\S+)", re.IGNORECASE)


def default_ssh_path() -> str:
    """PATH에서 ssh 실행 파일 위치 찾기 (없으면 'ssh')"""
    return shutil.which("ssh") or "ssh"


@dataclass(frozen=True)
class SshxPaths:
    """sshx가 사용하는 파일 경로 모음"""

    home: Path

    @classmethod
    def from_home(cls, home: Optional[Path] = None) -> "SshxPaths":
        """
        홈 디렉토리 기준으로 경로 생성

        Args:
            home: 홈 디렉토리 (None이면 현재 사용자의 홈)
        """
        if home is None:
            home = Path.home()
        return cls(home=Path(home))

    @property
    def private_dir(self) -> Path:
        return self.home / PRIVATE_DIR_NAME

    @property
    def settings_file(self) -> Path:
        return self.private_dir / SETTINGS_FILE_NAME

    @property
    def imported_config(self) -> Path:
        return self.private_dir / IMPORTED_CONFIG_NAME

    @property
    def ssh_config(self) -> Path:
        return self.home / ".ssh" / "config"


@dataclass(frozen=True)
class Settings:
    """sshx 설정 (시작 시 한 번 생성, 실행 중 변경 없음)"""

    paths: SshxPaths
    separator: str = "."
    enable_alias: bool = True
    ssh_path: str = field(default_factory=default_ssh_path)
    temporary_config_path: Optional[Path] = None

    @property
    def derived_config_path(self) -> Path:
        """생성된 ssh 설정 파일 위치"""
        if self.temporary_config_path is not None:
            return self.temporary_config_path
        return self.paths.ssh_config


def parse_settings(lines: Iterable[str], paths: SshxPaths) -> Settings:
    """
    설정 파일 내용을 Settings로 변환

    Args:
        lines: 설정 파일의 줄들
        paths: sshx 경로

    Returns:
        파싱된 설정 (지정되지 않은 항목은 기본값)
    """
    settings = Settings(paths=paths)

    for line in lines:
        line = line.rstrip("\r\n")

        match = _SEPARATOR_RE.search(line)
        if match:
            settings = replace(settings, separator=match.group(1))
            continue

        match = _ENABLE_ALIAS_RE.search(line)
        if match:
            enabled = re.search(r"true$", match.group(1), re.IGNORECASE) is not None
            settings = replace(settings, enable_alias=enabled)
            continue

        match = _SSH_PATH_RE.search(line)
        if match:
            settings = replace(settings, ssh_path=match.group(1))
            continue

        match = _TEMPORARY_PATH_RE.search(line)
        if match:
            temporary = Path(match.group(1)).expanduser()
            settings = replace(settings, temporary_config_path=temporary)
            continue

    return settings


def load_settings(paths: SshxPaths) -> Settings:
    """
    설정 파일 로드

    설정 파일이 없으면 FileNotFoundError가 그대로 전파됨
    (초기화 단계에서 항상 만들어지므로)
    """
    with open(paths.settings_file, "r", encoding="utf-8") as f:
        return parse_settings(f, paths)


def write_default_settings(paths: SshxPaths, ssh_path: Optional[str] = None) -> None:
    """초기 설정 파일 작성"""
    defaults = Settings(paths=paths)
    if ssh_path is None:
        ssh_path = defaults.ssh_path

    lines = [
        f"NamespaceSeparator {defaults.separator}",
        f"EnableAlias {'true' if defaults.enable_alias else 'false'}",
        f"SshPath {ssh_path}",
    ]
    with open(paths.settings_file, "w", encoding="utf-8") as f:
        f.write("\n".join(lines) + "\n")
