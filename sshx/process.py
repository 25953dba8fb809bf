"""
프로세스 실행 모듈 - 외부 프로그램(ssh, tmux) 호출

모든 호출은 인수 리스트로만 실행 (shell=True 사용 안 함)
테스트에서는 같은 메서드를 가진 가짜 러너로 교체
"""

import logging
import subprocess
from typing import Sequence


logger = logging.getLogger(__name__)


def exit_status(returncode: int) -> int:
    """
    자식 프로세스 종료 코드를 쉘 관례의 종료 상태로 변환

    시그널로 종료된 경우(음수, 예: -15)는 128 + 시그널 번호(143)
    """
    if returncode < 0:
        return 128 - returncode
    return returncode


class ProcessRunner:
    """subprocess 기반 외부 명령 실행기"""

    def call(self, argv: Sequence[str]) -> int:
        """
        터미널을 그대로 물려받아 실행하고 종료 상태 반환

        ssh 접속, tmux attach처럼 사용자와 상호작용하는 명령용
        """
        logger.debug('실행: %s', list(argv))
        return exit_status(subprocess.call(list(argv)))

    def run(self, argv: Sequence[str], check: bool = False) -> subprocess.CompletedProcess:
        """
        출력을 캡처하여 실행

        Args:
            argv: 실행할 명령 인수
            check: True면 실패 시 CalledProcessError 발생
        """
        logger.debug('실행: %s', list(argv))
        return subprocess.run(list(argv), capture_output=True, text=True, check=check)
