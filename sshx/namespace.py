"""
네임스페이스 병합 모듈 - 여러 호스트 정의 파일을 하나의 ssh 설정으로 합침

호스트 정의 파일 예시 (~/.sshx/work):
    Namespace work
    Host web
        HostName 10.0.0.10

변환 결과 (구분자 '.'):
    Host work.web
        HostName 10.0.0.10

구현 방식:
- Namespace 지시어는 파일 안에서 처음 나온 것만 적용, 출력에서는 제거
- Namespace 이후의 Host 줄만 이름 앞에 '<namespace><구분자>'를 붙임
- 파일은 이름순으로 병합 (같은 호스트 이름이 겹치면 먼저 나온 쪽이 우선)
"""

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional

from .settings import Settings, SshxPaths


logger = logging.getLogger(__name__)

BANNER = [
    "#############################################################",
    "# CAUTION!",
    "# This config is auto generated by sshx",
    "# You cannot edit this file. Edit ~/.sshx/ssh_config instead.",
    "#############################################################",
    "",
]

_NAMESPACE_RE = re.compile(r"^\s*Namespace\s+(\S+)", re.IGNORECASE)
_HOST_RE = re.compile(r"^(\s*Host\s+)(\S+)", re.IGNORECASE)


@dataclass
class HostFile:
    """파싱된 호스트 정의 파일"""

    name: str
    namespace: Optional[str] = None
    lines: list[str] = field(default_factory=list)


def parse_host_file(name: str, lines: Iterable[str], separator: str) -> HostFile:
    """
    호스트 정의 파일 한 개를 파싱하여 Host 줄을 변환

    Args:
        name: 파일 이름 (로그 표시용)
        lines: 파일의 줄들
        separator: 네임스페이스 구분자

    Returns:
        Namespace 줄이 제거되고 Host 줄이 변환된 HostFile
    """
    host_file = HostFile(name=name)

    for line in lines:
        line = line.rstrip("\r\n")

        match = _NAMESPACE_RE.match(line)
        if match:
            if host_file.namespace is None:
                host_file.namespace = match.group(1)
            continue

        if host_file.namespace is not None:
            prefix = host_file.namespace + separator
            line = _HOST_RE.sub(lambda m: m.group(1) + prefix + m.group(2), line, count=1)

        host_file.lines.append(line)

    return host_file


def source_files(paths: SshxPaths, exclude: Iterable[Path] = ()) -> list[Path]:
    """
    병합 대상 파일 목록 (이름순)

    제외 대상:
    - 점(.)으로 시작하는 파일
    - 설정 파일(config, 대소문자 무시)
    - 디렉토리
    - exclude로 넘긴 경로 (생성된 설정 파일이 같은 폴더에 있는 경우)
    """
    excluded = {Path(p).resolve() for p in exclude}
    files = []
    for path in sorted(paths.private_dir.iterdir(), key=lambda p: p.name):
        if path.name.startswith("."):
            continue
        if path.name.lower() == paths.settings_file.name.lower():
            continue
        if not path.is_file():
            continue
        if path.resolve() in excluded:
            continue
        files.append(path)
    return files


def render_derived_config(host_files: Iterable[HostFile]) -> str:
    """배너와 모든 파일 내용을 합친 설정 텍스트 생성"""
    lines = list(BANNER)
    for host_file in host_files:
        lines.extend(host_file.lines)
    return "\n".join(lines) + "\n"


def make_ssh_config(settings: Settings) -> Path:
    """
    호스트 정의 파일들을 병합하여 ssh 설정 파일 생성 (기존 내용 덮어씀)

    Args:
        settings: sshx 설정

    Returns:
        작성된 설정 파일 경로
    """
    target = settings.derived_config_path

    host_files = []
    for path in source_files(settings.paths, exclude=[target]):
        with open(path, "r", encoding="utf-8", errors="surrogateescape") as f:
            host_file = parse_host_file(path.name, f, settings.separator)
        logger.debug("병합: %s (namespace=%s)", path, host_file.namespace)
        host_files.append(host_file)

    target.parent.mkdir(parents=True, exist_ok=True)
    with open(target, "w", encoding="utf-8", errors="surrogateescape") as f:
        f.write(render_derived_config(host_files))

    logger.debug("ssh 설정 작성 완료: %s", target)
    return target


def list_hosts(text: str) -> list[str]:
    """
    생성된 설정에서 호스트 이름 목록 추출 (자동 완성용)

    와일드카드(*, ?) 패턴과 중복은 제외
    """
    hosts: list[str] = []
    for line in text.splitlines():
        match = _HOST_RE.match(line)
        if not match:
            continue
        host = match.group(2)
        if "*" in host or "?" in host:
            continue
        if host not in hosts:
            hosts.append(host)
    return hosts
