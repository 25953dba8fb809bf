"""
UI 모듈 - rich 라이브러리 기반 콘솔 출력

구현 방식:
- 사용자 메시지는 모두 stderr 콘솔로 출력
  (eval "$(sshx init -)" 실행 시 stdout에 섞이지 않도록)
- 쉘이 읽는 출력(init -)은 rich를 거치지 않고 그대로 stdout에 출력
- 진단 로그는 logging + RichHandler (SSHX_LOG_LEVEL 환경 변수로 레벨 지정)
"""

import logging
import os
import sys
from typing import Iterable

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.text import Text


# 콘솔 인스턴스 (전역)
console = Console(stderr=True)

LOG_LEVEL_ENV = "SSHX_LOG_LEVEL"

WELCOME_ART = [
    " ------------------------- ",
    "   ####  #### #   # #   #  ",
    "  #     #     #   #  # #   ",
    "   ###   ###  #####   #    ",
    "      #     # #   #  # #   ",
    "  ####  ####  #   # #   #  ",
    " ------------------------- ",
    "     Welcome to sshx!      ",
]


def setup_logging() -> None:
    """sshx 로거 설정 (중복 호출 시 핸들러를 다시 추가하지 않음)"""
    level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.WARNING

    root = logging.getLogger("sshx")
    root.setLevel(level)

    if any(isinstance(h, RichHandler) for h in root.handlers):
        return

    handler = RichHandler(console=console, show_path=False)
    handler.setLevel(level)
    root.addHandler(handler)


def print_welcome() -> None:
    """첫 실행 환영 메시지"""
    console.print(Text("\n".join(WELCOME_ART), style="cyan"), highlight=False)
    console.print()


def print_step(message: str) -> None:
    console.print(escape(message), soft_wrap=True, highlight=False)


def print_error(message: str) -> None:
    """에러 메시지 출력 ([ERROR] 접두사)"""
    console.print(f"[red]\\[ERROR] {escape(message)}[/red]", soft_wrap=True, highlight=False)


def print_snippet(lines: Iterable[str]) -> None:
    """쉘에 직접 입력해야 하는 명령 표시 (복사하기 쉽도록 줄바꿈 없이)"""
    console.print()
    for line in lines:
        console.print(escape(line), soft_wrap=True, highlight=False)
    console.print()


def print_usage() -> None:
    """인수 없이 실행했을 때 안내"""
    console.print("sshx is just a wrapper of ssh.", soft_wrap=True, highlight=False)


def write_raw(lines: Iterable[str]) -> None:
    """쉘이 eval할 출력 (rich 마크업/줄바꿈 처리 없이)"""
    text = "\n".join(lines)
    sys.stdout.write(text + "\n" if text else "")
    sys.stdout.flush()
