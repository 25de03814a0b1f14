"""
pytest 공통 fixture 정의
"""

import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir() -> Path:
    """OS 독립적인 임시 디렉토리 생성"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_secrets_file(temp_dir: Path) -> Path:
    """테스트용 secrets.yaml 파일 생성"""
    secrets_content = """# 테스트용 secrets.yaml
mintme:
  api_id: "file_api_id_12345"
  api_key: "file_api_key_67890"
"""
    secrets_path = temp_dir / "secrets.yaml"
    secrets_path.write_text(secrets_content, encoding="utf-8")
    return secrets_path


@pytest.fixture
def temp_secrets_file_with_urls(temp_dir: Path) -> Path:
    """URL/타임아웃 재정의가 포함된 secrets.yaml 파일 생성"""
    secrets_content = """mintme:
  api_id: "file_api_id_12345"
  api_key: "file_api_key_67890"
  public_url: "https://staging.example.com/api/v2/"
  private_url: "https://staging.example.com/private/v2"
  timeout: 5
"""
    secrets_path = temp_dir / "secrets_urls.yaml"
    secrets_path.write_text(secrets_content, encoding="utf-8")
    return secrets_path


@pytest.fixture
def temp_secrets_file_missing_key(temp_dir: Path) -> Path:
    """api_key가 없는 secrets.yaml 파일 생성"""
    secrets_content = """mintme:
  api_id: "file_api_id_12345"
"""
    secrets_path = temp_dir / "secrets_missing.yaml"
    secrets_path.write_text(secrets_content, encoding="utf-8")
    return secrets_path
