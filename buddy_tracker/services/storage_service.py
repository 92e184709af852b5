# buddy_tracker/services/storage_service.py
import os
import re
import uuid
import logging
from typing import Dict, Optional
from flask import Flask
from werkzeug.datastructures import FileStorage

from buddy_tracker.core.exceptions import MissingFileError, UnsupportedMediaError, SizeLimitError
from buddy_tracker.utils.datetime_utils import DateTimeUtils

class StorageService:
    """
    로컬 파일 시스템에 업로드 파일을 저장하는 범용 서비스 클래스입니다.
    저장된 파일은 공개 디렉터리에 놓이고 /uploads/<filename> 경로로 제공됩니다.
    """

    DEFAULT_EXTENSION = '.jpg'
    EXTENSION_PATTERN = re.compile(r'\.[A-Za-z0-9]+')

    def __init__(self):
        """
        실제 설정 값은 init_app 메서드를 통해 주입됩니다.
        """
        self.upload_folder: Optional[str] = None
        self.url_prefix = '/uploads'
        self.max_size = 5 * 1024 * 1024
        self.allowed_types = ()

    def init_app(self, app: Flask):
        """
        Flask 앱 초기화 과정에서 호출되어 업로드 경로와 제한 값을 설정합니다.

        :param app: Flask 애플리케이션 객체
        """
        upload_folder = app.config.get('UPLOAD_FOLDER')
        if not upload_folder:
            raise ValueError("UPLOAD_FOLDER 설정이 .env 또는 설정 파일에 필요합니다.")

        self.upload_folder = os.path.abspath(upload_folder)
        self.url_prefix = app.config.get('UPLOAD_URL_PREFIX', self.url_prefix).rstrip('/')
        self.max_size = int(app.config.get('MAX_UPLOAD_SIZE', self.max_size))
        self.allowed_types = tuple(app.config.get('ALLOWED_UPLOAD_TYPES', ()))
        logging.info(f"StorageService initialized (folder: {self.upload_folder}, max: {self.max_size} bytes)")

    def generate_filename(self, original_name: Optional[str]) -> str:
        """
        '{epoch-ms}-{6자리 랜덤}{확장자}' 형식의 고유 파일명을 생성합니다.
        원래 파일명의 확장자를 유지하고, 없거나 영숫자가 아니면 .jpg를 사용합니다.
        """
        extension = os.path.splitext(original_name or '')[1]
        if not self.EXTENSION_PATTERN.fullmatch(extension):
            extension = self.DEFAULT_EXTENSION
        timestamp_ms = DateTimeUtils.to_timestamp_ms(DateTimeUtils.now())
        return f"{timestamp_ms}-{uuid.uuid4().hex[:6]}{extension}"

    def save_upload(self, file: Optional[FileStorage]) -> Dict[str, str]:
        """
        업로드된 파일 하나를 검증하고 저장합니다.

        :param file: multipart 요청의 'file' 필드 (없으면 None)
        :return: 공개 URL과 생성된 파일명이 담긴 딕셔너리
        """
        if not self.upload_folder:
            raise RuntimeError("StorageService가 초기화되지 않았습니다. init_app을 먼저 호출해주세요.")

        if file is None:
            raise MissingFileError("No file provided")

        if file.mimetype not in self.allowed_types:
            raise UnsupportedMediaError("Invalid file type. Allowed: JPEG, PNG, GIF, WebP")

        # 제한보다 1바이트만 더 읽어 초과 여부를 판단합니다.
        content = file.stream.read(self.max_size + 1)
        if len(content) > self.max_size:
            raise SizeLimitError(f"File too large. Maximum size is {round(self.max_size / 1024 / 1024)}MB")

        filename = self.generate_filename(file.filename)
        os.makedirs(self.upload_folder, exist_ok=True)
        with open(os.path.join(self.upload_folder, filename), 'wb') as f:
            f.write(content)

        logging.info(f"Stored upload {filename} ({len(content)} bytes, {file.mimetype})")
        return {"url": f"{self.url_prefix}/{filename}", "filename": filename}
