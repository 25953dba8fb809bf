"""
초기화 모듈 - 첫 실행 시 ~/.sshx 생성 및 쉘 설정 수정

처리 순서:
1. ~/.sshx 디렉토리 생성
2. 기존 ~/.ssh/config를 ~/.sshx/ssh_config로 복사
3. 기본 설정 파일(~/.sshx/config) 작성
4. ~/.bashrc (없으면 ~/.bash_profile)에 eval "$(sshx init -)" 추가

~/.sshx가 이미 있으면 아무것도 하지 않음
"""

import shutil
from typing import Optional

from .settings import SshxPaths, write_default_settings
from .ui import print_error, print_snippet, print_step, print_welcome


INITIAL_COMMANDS = [
    "# Initialize sshx",
    'eval "$(sshx init -)"',
]

SHELL_STARTUP_FILES = [".bashrc", ".bash_profile"]


def init_sshx(paths: SshxPaths, ssh_path: Optional[str] = None) -> bool:
    """
    sshx 초기화

    Args:
        paths: sshx 경로
        ssh_path: 설정 파일에 기록할 ssh 경로 (None이면 PATH에서 검색)

    Returns:
        초기화 성공 여부 (쉘 시작 파일을 찾지 못하면 False)
    """
    if paths.private_dir.exists():
        return True

    print_welcome()
    print_step("Initialize sshx...")

    print_step("Import ssh config file...")
    paths.private_dir.mkdir(parents=True)
    if paths.ssh_config.exists():
        shutil.copyfile(paths.ssh_config, paths.imported_config)
    else:
        paths.imported_config.touch()

    print_step("Make config file...")
    write_default_settings(paths, ssh_path)

    print_step("Edit .bashrc file...")
    startup_file = None
    for name in SHELL_STARTUP_FILES:
        candidate = paths.home / name
        if candidate.exists():
            startup_file = candidate
            break

    if startup_file is None:
        print_error(
            "Failed to find ~/.bashrc or ~/.bash_profile. "
            "The following command should be run at the begining of shell."
        )
        print_snippet(INITIAL_COMMANDS)
        return False

    with open(startup_file, "a", encoding="utf-8") as f:
        f.write("\n".join(INITIAL_COMMANDS) + "\n")

    print_step("Successfully initialized.")
    print_step("")
    return True
