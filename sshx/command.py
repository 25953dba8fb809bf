"""
명령 생성 모듈 - ssh 인수에서 호스트를 찾아 호스트별 ssh 명령 생성

예시:
    sshx -p 22 web1,web2 -v
    -> [ssh, -p, 22, web1, -v]
       [ssh, -p, 22, web2, -v]

호스트 인수 찾기 규칙:
- '-'로 시작하는 토큰은 옵션
- 옵션 바로 다음 토큰은 값을 받는 옵션인지와 상관없이 건너뜀
- 그 외 첫 번째 토큰이 호스트 인수
"""

import re
import shlex
from typing import Optional, Sequence

from .settings import Settings


_HOST_SPLIT_RE = re.compile(r"\s*,\s*")


def find_hostname_index(args: Sequence[str]) -> Optional[int]:
    """
    호스트 인수의 위치 찾기

    Returns:
        호스트 인수 인덱스 (없으면 None)
    """
    is_option_parameter = False

    for i, arg in enumerate(args):
        if arg.startswith("-"):
            is_option_parameter = True
            continue
        if is_option_parameter:
            is_option_parameter = False
            continue
        return i

    return None


def split_hosts(token: str) -> list[str]:
    """쉼표로 구분된 호스트 목록 분리 (빈 항목 제외)"""
    return [host for host in _HOST_SPLIT_RE.split(token.strip()) if host]


def build_invocations(settings: Settings, args: Sequence[str]) -> list[list[str]]:
    """
    호스트별 ssh 명령 인수 목록 생성

    호스트 인수가 없으면 인수를 그대로 넘긴 명령 하나를 반환
    (ssh -V 같은 경우 ssh가 직접 처리하도록)

    Args:
        settings: sshx 설정
        args: sshx에 전달된 인수

    Returns:
        호스트 순서대로의 명령 인수 리스트
    """
    suffix: list[str] = []
    if settings.temporary_config_path is not None:
        suffix = ["-F", str(settings.temporary_config_path)]

    args = list(args)
    index = find_hostname_index(args)
    hosts = split_hosts(args[index]) if index is not None else []

    if not hosts:
        return [[settings.ssh_path, *args, *suffix]]

    invocations = []
    for host in hosts:
        host_args = list(args)
        host_args[index] = host
        invocations.append([settings.ssh_path, *host_args, *suffix])
    return invocations


def shell_join(argv: Sequence[str]) -> str:
    """tmux 패인에 입력할 수 있도록 인수를 이스케이프하여 한 줄로 합침"""
    return shlex.join(argv)
