"""
Video processing endpoints of the CDN client.
"""

from typing import Any, List, Optional

from ..core.query import with_query
from ..http import HTTPClient
from ..models import SuccessResponse, coerce_request
from .video_models import (
    CreateMergeJobRequest,
    ExtractAudioRequest,
    ExtractAudioResponse,
    GenerateGifRequest,
    ListJobsRequest,
    ListJobsResponse,
    ListMergeJobsRequest,
    ListMergeJobsResponse,
    ListThumbnailsResponse,
    MergeJob,
    MergeJobWithOutput,
    RegenerateThumbnailRequest,
    RegenerateThumbnailResponse,
    StreamingURLs,
    ThumbnailRequest,
    ThumbnailResponse,
    TranscodeJob,
    TranscodeVideoRequest,
    VideoGif,
)


class VideoMixin:
    """Transcoding, thumbnails, audio extraction, GIFs and merges."""

    _http: HTTPClient

    async def transcode(
        self, request: Optional[TranscodeVideoRequest] = None, **fields: Any
    ) -> TranscodeJob:
        request = coerce_request(TranscodeVideoRequest, request, fields)
        return await self._http.post("/cdn/video/transcode", request, TranscodeJob)

    async def get_job(self, job_id: str) -> TranscodeJob:
        return await self._http.get(f"/cdn/video/jobs/{job_id}", TranscodeJob)

    async def list_jobs(
        self, request: Optional[ListJobsRequest] = None, **filters: Any
    ) -> ListJobsResponse:
        request = coerce_request(ListJobsRequest, request, filters)
        return await self._http.get(
            with_query("/cdn/video/jobs", request.to_query()), ListJobsResponse
        )

    async def cancel_job(self, job_id: str) -> SuccessResponse:
        return await self._http.post(
            f"/cdn/video/jobs/{job_id}/cancel", {}, SuccessResponse
        )

    async def get_streaming_urls(self, asset_id: str) -> StreamingURLs:
        """HLS and MP4 URLs for a transcoded video."""
        return await self._http.get(f"/cdn/video/stream/{asset_id}", StreamingURLs)

    async def get_thumbnail(
        self, request: Optional[ThumbnailRequest] = None, **fields: Any
    ) -> ThumbnailResponse:
        request = coerce_request(ThumbnailRequest, request, fields)
        return await self._http.get(
            with_query(f"/cdn/video/thumbnail/{request.asset_id}", request.to_query()),
            ThumbnailResponse,
        )

    async def regenerate_thumbnail(
        self, request: Optional[RegenerateThumbnailRequest] = None, **fields: Any
    ) -> RegenerateThumbnailResponse:
        request = coerce_request(RegenerateThumbnailRequest, request, fields)
        return await self._http.post(
            "/cdn/video/thumbnail/regenerate", request, RegenerateThumbnailResponse
        )

    async def list_thumbnails(self, asset_id: str) -> ListThumbnailsResponse:
        return await self._http.get(
            f"/cdn/video/{asset_id}/thumbnails", ListThumbnailsResponse
        )

    async def extract_audio(
        self, request: Optional[ExtractAudioRequest] = None, **fields: Any
    ) -> ExtractAudioResponse:
        request = coerce_request(ExtractAudioRequest, request, fields)
        return await self._http.post(
            "/cdn/video/extract-audio", request, ExtractAudioResponse
        )

    async def generate_gif(
        self, request: Optional[GenerateGifRequest] = None, **fields: Any
    ) -> VideoGif:
        request = coerce_request(GenerateGifRequest, request, fields)
        return await self._http.post("/cdn/video/gif", request, VideoGif)

    async def get_gif(self, gif_id: str) -> VideoGif:
        return await self._http.get(f"/cdn/video/gif/{gif_id}", VideoGif)

    async def list_gifs(self, asset_id: str) -> List[VideoGif]:
        return await self._http.get(f"/cdn/video/{asset_id}/gifs", List[VideoGif])

    async def create_merge_job(
        self, request: Optional[CreateMergeJobRequest] = None, **fields: Any
    ) -> MergeJob:
        """Concatenate clips and stills, optionally over an audio track."""
        request = coerce_request(CreateMergeJobRequest, request, fields)
        return await self._http.post("/cdn/video/merge", request, MergeJob)

    async def get_merge_job(self, job_id: str) -> MergeJobWithOutput:
        return await self._http.get(f"/cdn/video/merge/{job_id}", MergeJobWithOutput)

    async def list_merge_jobs(
        self, request: Optional[ListMergeJobsRequest] = None, **filters: Any
    ) -> ListMergeJobsResponse:
        request = coerce_request(ListMergeJobsRequest, request, filters)
        return await self._http.get(
            with_query("/cdn/video/merge", request.to_query()), ListMergeJobsResponse
        )

    async def cancel_merge_job(self, job_id: str) -> SuccessResponse:
        return await self._http.post(
            f"/cdn/video/merge/{job_id}/cancel", {}, SuccessResponse
        )
