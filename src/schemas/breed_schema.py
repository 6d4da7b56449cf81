"""Pydantic 스키마 정의 - 견종 레코드"""
from typing import Any, Dict, Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class BreedRecord(BaseModel):
    """견종 레코드 (스냅샷의 한 항목)

    - name: 고유 키 (대소문자 구분, 정확히 일치할 때만 중복)
    - detail_link: 상세 페이지 절대 URL (구 스냅샷의 ``akcLink`` 키도 허용)
    - image_url: 이미지 절대 URL 또는 빈 문자열
    - description: 크롤링 시점의 짧은 소개, 보강 단계에서 더 긴 텍스트로만 교체
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, description="견종명 (고유 키)")
    detail_link: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("detailLink", "akcLink", "detail_link"),
        serialization_alias="detailLink",
        description="상세 페이지 URL",
    )
    image_url: str = Field(
        "",
        validation_alias=AliasChoices("imageUrl", "image_url"),
        serialization_alias="imageUrl",
        description="이미지 URL",
    )
    description: str = Field("", description="소개 문구")

    @field_validator("image_url", "description", mode="before")
    @classmethod
    def none_as_empty(cls, v: Optional[Any]) -> Any:
        """스냅샷의 null 값은 빈 문자열로 취급"""
        return "" if v is None else v

    def to_snapshot_dict(self) -> Dict[str, str]:
        """스냅샷 JSON 키(camelCase) 순서대로 직렬화"""
        return self.model_dump(by_alias=True)
