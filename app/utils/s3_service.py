"""
S3 service for car image uploads

Falls back to local files under UPLOAD_DIR when AWS credentials are not
configured; those are served from /static/uploads.
"""
from typing import Optional
from io import BytesIO
from pathlib import Path
import uuid
import boto3
from botocore.exceptions import BotoCoreError, ClientError
from fastapi import UploadFile

from app.core.config import settings
from app.core.exceptions import ValidationError, TransientStoreError
from app.core.logging_config import logger


class S3Service:
    def __init__(self):
        self.region = settings.AWS_REGION
        self.bucket_name = settings.S3_BUCKET_NAME
        self.upload_dir = Path(settings.UPLOAD_DIR)
        self.max_size = settings.MAX_UPLOAD_SIZE
        self.use_local_storage = not (settings.AWS_ACCESS_KEY_ID and settings.AWS_SECRET_ACCESS_KEY)
        self._s3_client = None

        logger.info(f"S3Service Init: use_local_storage={self.use_local_storage}")

    @property
    def s3_client(self):
        if self._s3_client is None:
            self._s3_client = boto3.client(
                's3',
                aws_access_key_id=settings.AWS_ACCESS_KEY_ID,
                aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY,
                region_name=self.region
            )
        return self._s3_client

    async def upload_file(
        self,
        file: UploadFile,
        folder: str = "uploads",
        object_name: Optional[str] = None
    ) -> str:
        """
        Upload a file to S3 or local storage

        Args:
            file: FastAPI UploadFile object
            folder: Key prefix
            object_name: Optional custom object name

        Returns:
            Public URL of the stored file

        Raises:
            ValidationError: File exceeds MAX_UPLOAD_SIZE
            TransientStoreError: S3 rejected the upload
        """
        if not object_name:
            file_extension = Path(file.filename).suffix if file.filename else '.bin'
            object_name = f"{uuid.uuid4().hex}{file_extension}"
        object_name = f"{folder}/{object_name}"

        await file.seek(0)
        file_content = await file.read()
        await file.seek(0)

        if len(file_content) > self.max_size:
            raise ValidationError(f"File exceeds maximum upload size of {self.max_size} bytes")

        if self.use_local_storage:
            local_path = self.upload_dir / object_name
            local_path.parent.mkdir(parents=True, exist_ok=True)
            local_path.write_bytes(file_content)

            url = f"/static/uploads/{object_name}"
            logger.info(f"File saved locally: {url}")
            return url

        try:
            self.s3_client.upload_fileobj(
                BytesIO(file_content),
                self.bucket_name,
                object_name,
                ExtraArgs={'ContentType': file.content_type or 'application/octet-stream'}
            )
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Error uploading file to S3: {str(e)}")
            raise TransientStoreError(f"Image upload failed: {str(e)}")

        url = f"https://{self.bucket_name}.s3.{self.region}.amazonaws.com/{object_name}"
        logger.info(f"File uploaded to S3: {url}")
        return url

    async def upload_car_image(self, file: UploadFile, car_id: int) -> str:
        """Upload a car image under cars/<car_id>/images"""
        return await self.upload_file(file, f"cars/{car_id}/images")


# Global instance
s3_service = S3Service()
