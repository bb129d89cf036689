"""
Models for appcenter_uploader.

Immutable dataclasses: request snapshots, wire requests and responses.
"""
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class SymbolType(Enum):
    """Debug symbol kinds accepted by App Center."""
    APPLE = "Apple"
    JAVASCRIPT = "JavaScript"
    BREAKPAD = "Breakpad"
    ANDROID_PROGUARD = "AndroidProguard"
    UWP = "UWP"

    @classmethod
    def parse(cls, value: str) -> "SymbolType":
        """Accept either the wire value or the member name, case-insensitive."""
        needle = value.strip().lower()
        for member in cls:
            if needle in (member.value.lower(), member.name.lower()):
                return member
        raise ValueError(f"Unsupported symbol type: {value}")


@dataclass(frozen=True)
class SymbolUploadBeginRequest:
    """Parameters for beginning a debug symbol upload."""
    symbol_type: SymbolType
    file_name: Optional[str] = None
    client_callback: Optional[str] = None
    build: Optional[str] = None
    version: Optional[str] = None

    def to_json(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"symbol_type": self.symbol_type.value}
        if self.client_callback is not None:
            payload["client_callback"] = self.client_callback
        if self.file_name is not None:
            payload["file_name"] = self.file_name
        if self.build is not None:
            payload["build"] = self.build
        if self.version is not None:
            payload["version"] = self.version
        return payload


@dataclass(frozen=True)
class ReleaseUploadBeginRequest:
    """Parameters for beginning a release upload."""
    build_version: Optional[str] = None
    build_number: Optional[str] = None

    def to_json(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {}
        if self.build_version is not None:
            payload["build_version"] = self.build_version
        if self.build_number is not None:
            payload["build_number"] = self.build_number
        return payload


@dataclass(frozen=True)
class ReleaseUploadBeginResponse:
    """Upload slot returned for a release."""
    id: str
    upload_domain: str
    url_encoded_token: str
    package_asset_id: str
    token: Optional[str] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "ReleaseUploadBeginResponse":
        return cls(
            id=data["id"],
            upload_domain=data["upload_domain"],
            url_encoded_token=data["url_encoded_token"],
            package_asset_id=data["package_asset_id"],
            token=data.get("token"),
        )


@dataclass(frozen=True)
class SymbolUploadBeginResponse:
    """Upload slot returned for debug symbols."""
    symbol_upload_id: str
    upload_url: str
    expiration_date: Optional[str] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "SymbolUploadBeginResponse":
        return cls(
            symbol_upload_id=data["symbol_upload_id"],
            upload_url=data["upload_url"],
            expiration_date=data.get("expiration_date"),
        )


@dataclass(frozen=True)
class UploadRequest:
    """
    Immutable snapshot of one upload workflow.

    Each pipeline stage produces a new snapshot through ``new_builder()``;
    fields filled by a stage stay ``None`` until that stage succeeds.
    """
    owner_name: str
    app_name: str
    build_version: str
    # Pass-through parameters for the later streaming/distribution stages
    path_to_app: Optional[str] = None
    path_to_debug_symbols: Optional[str] = None
    release_notes: Optional[str] = None
    destination_groups: Tuple[str, ...] = ()
    notify_testers: bool = True
    mandatory_update: bool = False
    commit_hash: Optional[str] = None
    branch_name: Optional[str] = None
    symbol_upload_request: Optional[SymbolUploadBeginRequest] = None
    # Filled by the app upload resource stage
    upload_id: Optional[str] = None
    upload_domain: Optional[str] = None
    token: Optional[str] = None
    package_asset_id: Optional[str] = None
    # Filled by the debug symbols upload resource stage
    symbol_upload_url: Optional[str] = None
    symbol_upload_id: Optional[str] = None

    @property
    def has_symbols(self) -> bool:
        return self.symbol_upload_request is not None

    @property
    def has_upload_resource(self) -> bool:
        return self.upload_id is not None

    def new_builder(self) -> "UploadRequestBuilder":
        return UploadRequestBuilder(self)

    @classmethod
    def builder(cls, owner_name: str, app_name: str, build_version: str) -> "UploadRequestBuilder":
        return UploadRequestBuilder(cls(owner_name, app_name, build_version))


class UploadRequestBuilder:
    """
    Builder producing new ``UploadRequest`` snapshots.

    Overrides are collected in a private dict; ``build()`` copies every
    other field from the source snapshot, which is never touched.
    """

    _FIELD_NAMES = frozenset(f.name for f in fields(UploadRequest))

    def __init__(self, source: UploadRequest):
        self._source = source
        self._overrides: Dict[str, Any] = {}

    def _set(self, name: str, value: Any) -> "UploadRequestBuilder":
        if name not in self._FIELD_NAMES:
            raise AttributeError(f"UploadRequest has no field {name!r}")
        self._overrides[name] = value
        return self

    def set_owner_name(self, value: str) -> "UploadRequestBuilder":
        return self._set("owner_name", value)

    def set_app_name(self, value: str) -> "UploadRequestBuilder":
        return self._set("app_name", value)

    def set_build_version(self, value: str) -> "UploadRequestBuilder":
        return self._set("build_version", value)

    def set_path_to_app(self, value: Optional[str]) -> "UploadRequestBuilder":
        return self._set("path_to_app", value)

    def set_path_to_debug_symbols(self, value: Optional[str]) -> "UploadRequestBuilder":
        return self._set("path_to_debug_symbols", value)

    def set_release_notes(self, value: Optional[str]) -> "UploadRequestBuilder":
        return self._set("release_notes", value)

    def set_destination_groups(self, value) -> "UploadRequestBuilder":
        return self._set("destination_groups", tuple(value or ()))

    def set_notify_testers(self, value: bool) -> "UploadRequestBuilder":
        return self._set("notify_testers", value)

    def set_mandatory_update(self, value: bool) -> "UploadRequestBuilder":
        return self._set("mandatory_update", value)

    def set_commit_hash(self, value: Optional[str]) -> "UploadRequestBuilder":
        return self._set("commit_hash", value)

    def set_branch_name(self, value: Optional[str]) -> "UploadRequestBuilder":
        return self._set("branch_name", value)

    def set_symbol_upload_request(
        self, value: Optional[SymbolUploadBeginRequest]
    ) -> "UploadRequestBuilder":
        return self._set("symbol_upload_request", value)

    def set_upload_id(self, value: str) -> "UploadRequestBuilder":
        return self._set("upload_id", value)

    def set_upload_domain(self, value: str) -> "UploadRequestBuilder":
        return self._set("upload_domain", value)

    def set_token(self, value: str) -> "UploadRequestBuilder":
        return self._set("token", value)

    def set_package_asset_id(self, value: str) -> "UploadRequestBuilder":
        return self._set("package_asset_id", value)

    def set_symbol_upload_url(self, value: str) -> "UploadRequestBuilder":
        return self._set("symbol_upload_url", value)

    def set_symbol_upload_id(self, value: str) -> "UploadRequestBuilder":
        return self._set("symbol_upload_id", value)

    def build(self) -> UploadRequest:
        request = replace(self._source, **self._overrides)
        for name in ("owner_name", "app_name", "build_version"):
            if not getattr(request, name):
                raise ValueError(f"UploadRequest.{name} is required")
        return request


@dataclass(frozen=True)
class UploadConfig:
    """Immutable configuration for the App Center API."""
    api_token: str
    api_url: str = "https://api.appcenter.ms/"
    timeout: int = 60
