"""
Data models for video transcoding, thumbnails, GIFs and merges.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import ConfigDict, Field

from ..models import RequestModel, ResponseModel


class VideoQuality(str, Enum):
    Q360P = "360p"
    Q480P = "480p"
    Q720P = "720p"
    Q1080P = "1080p"
    Q1440P = "1440p"
    Q2160P = "2160p"


class VideoCodec(str, Enum):
    H264 = "h264"
    H265 = "h265"


class VideoOutputFormat(str, Enum):
    HLS = "hls"
    MP4 = "mp4"


class TranscodingStatus(str, Enum):
    PENDING = "pending"
    QUEUED = "queued"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"
    CANCELLED = "cancelled"


class GifStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


class MergeOutputFormat(str, Enum):
    MP4 = "mp4"
    WEBM = "webm"


class VideoVariant(RequestModel):
    model_config = ConfigDict(extra="ignore")

    quality: VideoQuality
    codec: Optional[VideoCodec] = None
    bitrate: Optional[int] = None


class WatermarkOptions(RequestModel):
    type: str
    position: str
    image_asset_id: Optional[str] = None
    text: Optional[str] = None
    opacity: Optional[int] = None


class TrimOptions(RequestModel):
    start: float
    end: float


class TranscodeVideoRequest(RequestModel):
    project_slug: str
    asset_id: str
    output_format: VideoOutputFormat
    variants: List[VideoVariant]
    watermark: Optional[WatermarkOptions] = None
    trim: Optional[TrimOptions] = None
    webhook_url: Optional[str] = None


class TranscodeJob(ResponseModel):
    id: str
    asset_id: str = ""
    status: TranscodingStatus
    output_format: Optional[VideoOutputFormat] = None
    variants: List[VideoVariant] = Field(default_factory=list)
    progress: Optional[int] = None
    error: Optional[str] = None
    media_convert_job_id: Optional[str] = None
    created_at: Optional[datetime] = None
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None


class ListJobsRequest(RequestModel):
    project_slug: str
    asset_id: Optional[str] = None
    status: Optional[TranscodingStatus] = None
    limit: Optional[int] = None
    offset: Optional[int] = None


class ListJobsResponse(ResponseModel):
    jobs: List[TranscodeJob] = Field(default_factory=list)
    total: int = 0
    has_more: bool = False


class MP4URL(ResponseModel):
    quality: VideoQuality
    url: str


class ThumbnailInfo(ResponseModel):
    url: str
    timestamp: float = 0
    width: int = 0
    height: int = 0


class StreamingURLs(ResponseModel):
    hls_url: Optional[str] = None
    mp4_urls: List[MP4URL] = Field(default_factory=list)
    thumbnails: List[ThumbnailInfo] = Field(default_factory=list)


class ThumbnailRequest(RequestModel):
    """Thumbnail at ``timestamp`` seconds. ``asset_id`` is part of the path."""

    asset_id: str = Field(exclude=True)
    timestamp: float
    width: Optional[int] = None
    format: Optional[str] = None


class ThumbnailResponse(ResponseModel):
    url: str
    timestamp: float = 0
    width: int = 0
    height: int = 0


class RegenerateThumbnailRequest(RequestModel):
    asset_id: str
    timestamp: float
    width: Optional[int] = None
    format: Optional[str] = None


class RegenerateThumbnailResponse(ResponseModel):
    id: Optional[str] = None
    asset_id: str = ""
    timestamp: float = 0
    url: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    format: str = ""
    status: Optional[str] = None


class VideoThumbnail(ResponseModel):
    id: str
    asset_id: str = ""
    timestamp: float = 0
    url: str = ""
    width: Optional[int] = None
    height: Optional[int] = None
    format: str = ""


class ListThumbnailsResponse(ResponseModel):
    thumbnails: List[VideoThumbnail] = Field(default_factory=list)


class ExtractAudioRequest(RequestModel):
    project_slug: str
    asset_id: str
    format: str
    bitrate: Optional[int] = None


class ExtractAudioResponse(ResponseModel):
    job_id: str
    status: TranscodingStatus


class GenerateGifRequest(RequestModel):
    project_slug: str
    asset_id: str
    start_time: Optional[float] = None
    duration: Optional[float] = None
    width: Optional[int] = None
    fps: Optional[int] = None
    optimize_palette: Optional[bool] = None


class VideoGif(ResponseModel):
    id: str
    asset_id: str = ""
    start_time: float = 0
    duration: float = 0
    fps: int = 0
    url: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    size_bytes: Optional[int] = None
    frame_count: Optional[int] = None
    status: GifStatus
    error_message: Optional[str] = None
    created_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None


class TextOverlayShadow(RequestModel):
    color: Optional[str] = None
    offset_x: Optional[int] = None
    offset_y: Optional[int] = None


class TextOverlayStroke(RequestModel):
    color: Optional[str] = None
    width: Optional[int] = None


class TextOverlay(RequestModel):
    text: str
    position: Optional[str] = None
    font_size: Optional[int] = None
    font_family: Optional[str] = None
    font_weight: Optional[str] = None
    color: Optional[str] = None
    background_color: Optional[str] = None
    padding: Optional[int] = None
    max_width: Optional[int] = None
    shadow: Optional[TextOverlayShadow] = None
    stroke: Optional[TextOverlayStroke] = None


class MergeInputItem(RequestModel):
    """One clip or still of a merge. Stills need ``duration``."""

    model_config = ConfigDict(extra="ignore")

    asset_id: str
    duration: Optional[float] = None
    start_time: Optional[float] = None
    end_time: Optional[float] = None
    text_overlay: Optional[TextOverlay] = None


class AudioTrackInput(RequestModel):
    asset_id: str
    loop: Optional[bool] = None
    fade_in: Optional[float] = None
    fade_out: Optional[float] = None


class MergeOutputConfig(RequestModel):
    format: Optional[MergeOutputFormat] = None
    quality: Optional[VideoQuality] = None
    filename: Optional[str] = None


class CreateMergeJobRequest(RequestModel):
    project_slug: str
    inputs: List[MergeInputItem]
    audio_track: Optional[AudioTrackInput] = None
    output: Optional[MergeOutputConfig] = None
    webhook_url: Optional[str] = None


class MergeJobOutputAsset(ResponseModel):
    id: str
    cdn_url: str = ""
    direct_url: str = ""
    filename: str = ""
    size: int = 0
    duration: Optional[float] = None


class MergeJob(ResponseModel):
    id: str
    organization_id: Optional[str] = None
    project_id: Optional[str] = None
    environment: Optional[str] = None
    inputs: List[MergeInputItem] = Field(default_factory=list)
    audio_track_asset_id: Optional[str] = None
    output_format: Optional[MergeOutputFormat] = None
    output_quality: Optional[VideoQuality] = None
    output_filename: Optional[str] = None
    output_asset_id: Optional[str] = None
    status: TranscodingStatus
    progress: Optional[int] = None
    error_message: Optional[str] = None
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    total_duration_seconds: Optional[float] = None
    webhook_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class MergeJobWithOutput(MergeJob):
    output_asset: Optional[MergeJobOutputAsset] = None


class ListMergeJobsRequest(RequestModel):
    project_slug: str
    status: Optional[TranscodingStatus] = None
    limit: Optional[int] = None
    offset: Optional[int] = None


class ListMergeJobsResponse(ResponseModel):
    jobs: List[MergeJob] = Field(default_factory=list)
    total: int = 0
    has_more: bool = False
