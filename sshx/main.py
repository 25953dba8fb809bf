#!/usr/bin/env python3
"""
sshx - 메인 진입점

실행 방법:
    sshx [ssh 인수...] host[,host2,...] [ssh 인수...]
    sshx                # 사용법 + ssh 도움말
    sshx init -         # 쉘 연동 명령 출력
    python -m sshx

인수는 ssh에 그대로 전달되므로 argparse로 파싱하지 않음
"""

import sys
from typing import Optional, Sequence

from .bootstrap import init_sshx
from .command import build_invocations
from .completion import make_commands
from .dispatcher import dispatch
from .namespace import make_ssh_config
from .process import ProcessRunner
from .settings import SshxPaths, load_settings
from .ui import console, print_usage, setup_logging, write_raw


def main(
    argv: Optional[Sequence[str]] = None,
    paths: Optional[SshxPaths] = None,
    runner: Optional[ProcessRunner] = None,
) -> int:
    """
    메인 함수

    Args:
        argv: 명령줄 인수 (None이면 sys.argv[1:])
        paths: sshx 경로 (None이면 현재 사용자의 홈 기준)
        runner: 외부 명령 실행기

    Returns:
        종료 코드
    """
    args = list(sys.argv[1:] if argv is None else argv)
    paths = paths or SshxPaths.from_home()
    runner = runner or ProcessRunner()

    setup_logging()

    if not init_sshx(paths):
        return 1

    settings = load_settings(paths)
    make_ssh_config(settings)

    if not args:
        print_usage()
        runner.call([settings.ssh_path])
        return 0

    if args == ["init", "-"]:
        write_raw(make_commands(settings))
        return 0

    invocations = build_invocations(settings, args)
    return dispatch(settings, invocations, runner)


def run() -> None:
    """콘솔 스크립트 진입점"""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        console.print()
        sys.exit(130)


if __name__ == "__main__":
    run()
