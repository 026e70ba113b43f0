from .client import CDNClient
from .transform import ALLOWED_WIDTHS, build_transform_query, build_transform_url, nearest_width
from .models import (
    Asset,
    AssetStatus,
    AssetType,
    CreateFolderRequest,
    DeleteAssetsResponse,
    Folder,
    FolderTreeNode,
    FolderTreeResponse,
    GetFolderTreeRequest,
    ImageWatermarkConfig,
    ImageWatermarkPosition,
    ImageWatermarkSizingMode,
    ListAssetsRequest,
    ListAssetsResponse,
    ListFoldersRequest,
    ListFoldersResponse,
    MoveAssetsRequest,
    MoveAssetsResponse,
    MoveFolderRequest,
    MoveFolderResponse,
    TransformOptions,
    UpdateAssetRequest,
    UpdateFolderRequest,
    UploadURLRequest,
    UploadURLResponse,
)
from .video_models import (
    AudioTrackInput,
    CreateMergeJobRequest,
    ExtractAudioRequest,
    ExtractAudioResponse,
    GenerateGifRequest,
    GifStatus,
    ListJobsRequest,
    ListJobsResponse,
    ListMergeJobsRequest,
    ListMergeJobsResponse,
    ListThumbnailsResponse,
    MP4URL,
    MergeInputItem,
    MergeJob,
    MergeJobOutputAsset,
    MergeJobWithOutput,
    MergeOutputConfig,
    MergeOutputFormat,
    RegenerateThumbnailRequest,
    RegenerateThumbnailResponse,
    StreamingURLs,
    TextOverlay,
    TextOverlayShadow,
    TextOverlayStroke,
    ThumbnailInfo,
    ThumbnailRequest,
    ThumbnailResponse,
    TranscodeJob,
    TranscodeVideoRequest,
    TranscodingStatus,
    TrimOptions,
    VideoCodec,
    VideoGif,
    VideoOutputFormat,
    VideoQuality,
    VideoThumbnail,
    VideoVariant,
    WatermarkOptions,
)
from .private_models import (
    BundleStatus,
    CreateBundleRequest,
    CreateBundleResponse,
    DownloadBundle,
    DownloadURLResponse,
    ListBundlesRequest,
    ListBundlesResponse,
    ListPrivateFilesRequest,
    ListPrivateFilesResponse,
    MovePrivateFilesRequest,
    MovePrivateFilesResponse,
    PrivateFile,
    PrivateFileStatus,
    PrivateUploadURLRequest,
    PrivateUploadURLResponse,
    UpdatePrivateFileRequest,
)
from .import_models import (
    CancelImportResponse,
    CreateImportRequest,
    CreateImportResponse,
    ImportAuthType,
    ImportFailure,
    ImportFile,
    ImportFileStatus,
    ImportJob,
    ImportJobStatus,
    ImportJobSummary,
    ImportPathMode,
    ListImportFilesRequest,
    ListImportFilesResponse,
    ListImportsRequest,
    ListImportsResponse,
    RetryImportResponse,
)
from .usage_models import (
    CdnStorageBreakdownItem,
    CdnStorageBreakdownRequest,
    CdnStorageBreakdownResponse,
    CdnStorageBreakdownTotal,
    CdnUsageDataPoint,
    CdnUsageHistoryRequest,
    CdnUsageHistoryResponse,
    CdnUsageHistoryTotals,
    CdnUsageRequest,
    CdnUsageResponse,
)

__all__ = [
    "CDNClient",
    "ALLOWED_WIDTHS",
    "build_transform_query",
    "build_transform_url",
    "nearest_width",
    "Asset",
    "AssetStatus",
    "AssetType",
    "CreateFolderRequest",
    "DeleteAssetsResponse",
    "Folder",
    "FolderTreeNode",
    "FolderTreeResponse",
    "GetFolderTreeRequest",
    "ImageWatermarkConfig",
    "ImageWatermarkPosition",
    "ImageWatermarkSizingMode",
    "ListAssetsRequest",
    "ListAssetsResponse",
    "ListFoldersRequest",
    "ListFoldersResponse",
    "MoveAssetsRequest",
    "MoveAssetsResponse",
    "MoveFolderRequest",
    "MoveFolderResponse",
    "TransformOptions",
    "UpdateAssetRequest",
    "UpdateFolderRequest",
    "UploadURLRequest",
    "UploadURLResponse",
    "AudioTrackInput",
    "CreateMergeJobRequest",
    "ExtractAudioRequest",
    "ExtractAudioResponse",
    "GenerateGifRequest",
    "GifStatus",
    "ListJobsRequest",
    "ListJobsResponse",
    "ListMergeJobsRequest",
    "ListMergeJobsResponse",
    "ListThumbnailsResponse",
    "MP4URL",
    "MergeInputItem",
    "MergeJob",
    "MergeJobOutputAsset",
    "MergeJobWithOutput",
    "MergeOutputConfig",
    "MergeOutputFormat",
    "RegenerateThumbnailRequest",
    "RegenerateThumbnailResponse",
    "StreamingURLs",
    "TextOverlay",
    "TextOverlayShadow",
    "TextOverlayStroke",
    "ThumbnailInfo",
    "ThumbnailRequest",
    "ThumbnailResponse",
    "TranscodeJob",
    "TranscodeVideoRequest",
    "TranscodingStatus",
    "TrimOptions",
    "VideoCodec",
    "VideoGif",
    "VideoOutputFormat",
    "VideoQuality",
    "VideoThumbnail",
    "VideoVariant",
    "WatermarkOptions",
    "BundleStatus",
    "CreateBundleRequest",
    "CreateBundleResponse",
    "DownloadBundle",
    "DownloadURLResponse",
    "ListBundlesRequest",
    "ListBundlesResponse",
    "ListPrivateFilesRequest",
    "ListPrivateFilesResponse",
    "MovePrivateFilesRequest",
    "MovePrivateFilesResponse",
    "PrivateFile",
    "PrivateFileStatus",
    "PrivateUploadURLRequest",
    "PrivateUploadURLResponse",
    "UpdatePrivateFileRequest",
    "CancelImportResponse",
    "CreateImportRequest",
    "CreateImportResponse",
    "ImportAuthType",
    "ImportFailure",
    "ImportFile",
    "ImportFileStatus",
    "ImportJob",
    "ImportJobStatus",
    "ImportJobSummary",
    "ImportPathMode",
    "ListImportFilesRequest",
    "ListImportFilesResponse",
    "ListImportsRequest",
    "ListImportsResponse",
    "RetryImportResponse",
    "CdnStorageBreakdownItem",
    "CdnStorageBreakdownRequest",
    "CdnStorageBreakdownResponse",
    "CdnStorageBreakdownTotal",
    "CdnUsageDataPoint",
    "CdnUsageHistoryRequest",
    "CdnUsageHistoryResponse",
    "CdnUsageHistoryTotals",
    "CdnUsageRequest",
    "CdnUsageResponse",
]
