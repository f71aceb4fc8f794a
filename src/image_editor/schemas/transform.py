"""
Transform API models.

This module contains models for transform operations:
- Transform requests and responses
- Pixel dump requests and responses
- Operation listing
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from image_editor.common.enums import BlurEdgeMode, ImageFormat, OperationType, PixelDumpFormat


class ImageInfo(BaseModel):
    """Dimensions and layout of a pixel buffer"""

    width: int
    height: int
    channels: int
    mode: str


class TransformRequest(BaseModel):
    """Request to apply one operation to an image file"""

    model_config = ConfigDict(extra="forbid")

    file_path: str = Field(..., description="Path to image file (JPG, PNG, BMP, etc.)")
    operation: OperationType = Field(..., description="Operation to apply")
    percentage: Optional[int] = Field(None, description="Brightness percentage (brightness only)")
    block_size: Optional[int] = Field(None, description="Blur block size (blur only)")
    edge_mode: Optional[BlurEdgeMode] = Field(None, description="Blur edge mode (blur only)")
    output_path: Optional[str] = Field(None, description="Where to write the result")
    output_format: Optional[ImageFormat] = Field(None, description="Format of the result")
    include_image: bool = Field(False, description="Return the result as base64 PNG")


class TransformResponse(BaseModel):
    """Result of a transform"""

    success: bool = True
    operation: OperationType
    source_path: str
    output_path: str
    input: ImageInfo
    output: ImageInfo
    processing_time_ms: int
    image_base64: Optional[str] = None


class PixelDumpRequest(BaseModel):
    """Request to print the pixel values of an image file"""

    model_config = ConfigDict(extra="forbid")

    file_path: str = Field(..., description="Path to image file")
    format: PixelDumpFormat = Field(PixelDumpFormat.PACKED, description="Value representation")


class PixelDumpResponse(BaseModel):
    """Pixel values, one space-separated string per row"""

    width: int
    height: int
    format: PixelDumpFormat
    rows: List[str]


class OperationInfo(BaseModel):
    """Description of an available operation"""

    name: str
    required_params: List[str] = Field(default_factory=list)
    optional_params: List[str] = Field(default_factory=list)
    description: str = ""


class OperationsResponse(BaseModel):
    """Available operations"""

    operations: List[OperationInfo]
