"""
멀티 터미널 모듈 - 여러 호스트의 ssh 접속을 tmux 분할 화면으로 표시

tmux 구조:
- 세션(session): 여러 윈도우를 포함
- 윈도우(window): 여러 패인을 포함
- 패인(pane): 실제 터미널 화면

동작 순서:
1. 세션 생성 (빈 패인 하나가 같이 만들어짐)
2. 호스트마다 패인을 분할하고 ssh 명령을 입력 후 Enter
3. 처음 만들어진 빈 패인 제거
4. 동기화 입력(synchronize-panes) 켜고 attach

세션이나 패인 생성에 실패하면 세션을 정리하고 종료 코드 1 반환
(다른 호스트의 패인에 명령이 입력되지 않도록)
"""

import os
import shutil
from typing import Optional, Sequence

from .command import shell_join
from .process import ProcessRunner
from .ui import print_error


TMUX_INSTALL_URL = 'https://github.com/tmux/tmux'


def is_tmux_available() -> bool:
    """tmux 설치 여부 확인"""
    return shutil.which('tmux') is not None


def is_running_in_tmux() -> bool:
    """현재 tmux 세션 내에서 실행 중인지 확인"""
    return os.environ.get('TMUX') is not None


class TmuxCommandError(Exception):
    """tmux 명령 실패"""

    def __init__(self, args: Sequence[str], returncode: int, stderr: str = ''):
        self.args_list = list(args)
        self.returncode = returncode
        self.stderr = (stderr or '').strip()
        message = f'tmux {" ".join(self.args_list)} failed ({returncode})'
        if self.stderr:
            message += f': {self.stderr}'
        super().__init__(message)


class TmuxMultiTerminal:
    """
    tmux를 사용한 멀티 터미널 관리

    하나의 윈도우에 호스트 수만큼 패인을 만들어
    각 패인에서 ssh 명령을 실행합니다.
    """

    SESSION_NAME = 'sshx-session'
    WINDOW_NAME = 'sshx-window'
    LAYOUT = 'tiled'

    def __init__(self, runner: Optional[ProcessRunner] = None):
        self.runner = runner or ProcessRunner()

    @property
    def window_target(self) -> str:
        return f'{self.SESSION_NAME}:{self.WINDOW_NAME}'

    def _tmux(self, *args: str, check: bool = False) -> str:
        """
        tmux 명령 실행 후 표준 출력 반환

        Args:
            check: True면 실패 시 TmuxCommandError 발생
        """
        result = self.runner.run(['tmux', *args])
        if check and result.returncode != 0:
            raise TmuxCommandError(args, result.returncode, result.stderr)
        return (result.stdout or '').strip()

    def _new_pane(self, *args: str) -> str:
        """패인을 만드는 명령 실행 후 패인 ID 반환 (ID가 없으면 실패로 처리)"""
        pane = self._tmux(*args, '-P', '-F', '#{pane_id}', check=True)
        if not pane:
            raise TmuxCommandError(args, 0, 'no pane id returned')
        return pane

    def launch(self, invocations: Sequence[Sequence[str]], sync_input: bool = True) -> int:
        """
        tmux 분할 화면으로 ssh 접속 실행

        Args:
            invocations: 패인마다 실행할 명령 인수
            sync_input: True면 모든 패인에 동시 입력 (synchronize-panes)

        Returns:
            attach(또는 switch-client)의 종료 코드, 패인 생성 실패 시 1
        """
        if not invocations:
            return 1

        self._tmux('start-server')

        # 기존 세션 종료
        self._tmux('kill-session', '-t', self.SESSION_NAME)

        try:
            placeholder = self._new_pane(
                'new-session', '-d',
                '-s', self.SESSION_NAME,
                '-n', self.WINDOW_NAME,
            )

            panes = []
            for argv in invocations:
                pane = self._new_pane('split-window', '-v', '-t', self.window_target)
                panes.append(pane)

                self._tmux('send-keys', '-t', pane, shell_join(argv), 'C-m')

                # 레이아웃 균등 분배
                self._tmux('select-layout', '-t', self.window_target, self.LAYOUT)
        except TmuxCommandError as e:
            print_error(str(e))
            self._tmux('kill-session', '-t', self.SESSION_NAME)
            return 1

        # 세션 생성 시 만들어진 빈 패인 제거
        self._tmux('kill-pane', '-t', placeholder)

        self._tmux('select-window', '-t', self.window_target)
        self._tmux('select-pane', '-t', panes[0])
        self._tmux('select-layout', '-t', self.window_target, self.LAYOUT)

        if sync_input:
            self._tmux(
                'set-window-option', '-t', self.window_target,
                'synchronize-panes', 'on',
            )

        if is_running_in_tmux():
            # 이미 tmux 안이면 switch
            return self.runner.call(['tmux', 'switch-client', '-t', self.SESSION_NAME])
        return self.runner.call(['tmux', 'attach-session', '-t', self.SESSION_NAME])
