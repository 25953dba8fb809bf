"""
실행 분기 모듈 - 호스트가 하나면 ssh 직접 실행, 여러 개면 tmux로 분할 실행
"""

import logging
from pathlib import Path
from typing import Optional, Sequence

from .multi_terminal import TMUX_INSTALL_URL, TmuxMultiTerminal, is_tmux_available
from .process import ProcessRunner
from .settings import Settings
from .ui import print_error


logger = logging.getLogger(__name__)


def dispatch(
    settings: Settings,
    invocations: Sequence[Sequence[str]],
    runner: Optional[ProcessRunner] = None,
) -> int:
    """
    명령 실행

    Args:
        settings: sshx 설정
        invocations: 호스트별 명령 인수
        runner: 외부 명령 실행기 (테스트용 교체 가능)

    Returns:
        프로세스 종료 코드
    """
    runner = runner or ProcessRunner()

    if len(invocations) == 1:
        try:
            return runner.call(invocations[0])
        finally:
            if settings.temporary_config_path is not None:
                _remove_quietly(settings.temporary_config_path)

    if not is_tmux_available():
        print_error(
            "tmux must be installed to use multi host connection. "
            f"Install tmux from the following url. {TMUX_INSTALL_URL}"
        )
        return 1

    # 패인의 ssh가 임시 설정 파일을 늦게 읽을 수 있으므로 여기서는 삭제하지 않음
    logger.debug("tmux로 %d개 호스트 접속", len(invocations))
    return TmuxMultiTerminal(runner).launch(invocations)


def _remove_quietly(path: Path) -> None:
    """임시 설정 파일 삭제 (이미 없으면 무시)"""
    try:
        path.unlink()
    except FileNotFoundError:
        pass
