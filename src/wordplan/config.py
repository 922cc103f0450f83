from typing import Annotated

from pydantic import AliasChoices, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic_settings.sources.types import NoDecode


DEFAULT_MAX_TOTAL_WORDS = 100_000
DEFAULT_MAX_PLAN_DAYS = 3650


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    環境変数から読み込まれるアプリ設定クラス。
    - environment: 実行環境（development/staging/production など）
    - max_total_words / max_plan_days: 入力フォームで受け付ける上限
    - default_include_review: 復習を含めるかの既定値
    """

    environment: str = Field(
        default="development",
        description="Runtime environment / 実行環境",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level / ログレベル",
    )

    # --- 学習計画の入力上限 ---
    max_total_words: int = Field(
        default=DEFAULT_MAX_TOTAL_WORDS,
        description="Upper bound for total vocabulary size / 総単語数の上限",
    )
    max_plan_days: int = Field(
        default=DEFAULT_MAX_PLAN_DAYS,
        description="Upper bound for plan length in days / 計画日数の上限",
    )
    default_include_review: bool = Field(
        default=True,
        description="Include review sessions when the request omits the flag / 復習を含める既定値",
    )

    # --- 忘却曲線（チャート用の例示値） ---
    curve_days: int = Field(
        default=30,
        ge=1,
        description="Number of days plotted on the forgetting curve / 忘却曲線の描画日数",
    )

    allowed_cors_origins: Annotated[tuple[str, ...], NoDecode] = Field(
        default=(),
        description=(
            "Comma separated CORS origins / CORS で許可するオリジンのカンマ区切り一覧"
        ),
        validation_alias=AliasChoices("allowed_cors_origins", "cors_allowed_origins"),
    )

    # --- Strict mode ---
    strict_mode: bool = Field(
        default=False,
        description="Fail fast on inconsistent planner limits / 上限設定の不整合で起動を止める",
    )

    # Pydantic v2 settings config
    # - env_file: .env を読み込む
    # - extra: .env に存在する未使用キーを無視
    # - case_sensitive: 環境変数キーの大小文字を区別しない
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("allowed_cors_origins", mode="before")
    @classmethod
    def _normalise_allowed_cors_origins(
        cls, raw_origins: object
    ) -> tuple[str, ...] | object:  # pragma: no cover - pydantic handles typing
        """Convert environment input into a deduplicated tuple of origins.

        `.env` のカンマ区切り文字列から空白と重複を取り除き、タプルへ正規化する。
        """

        if raw_origins is None:
            candidates: list[str] = []
        elif isinstance(raw_origins, str):
            candidates = raw_origins.split(",")
        else:
            try:
                candidates = list(raw_origins)
            except TypeError:
                return raw_origins

        normalised: list[str] = []
        seen: set[str] = set()
        for candidate in candidates:
            if not isinstance(candidate, str):
                continue
            trimmed = candidate.strip()
            if not trimmed or trimmed in seen:
                continue
            seen.add(trimmed)
            normalised.append(trimmed)

        return tuple(normalised)

    @field_validator("log_level", mode="after")
    @classmethod
    def _normalise_log_level(cls, value: str) -> str:
        return (value or "INFO").strip().upper() or "INFO"

    @model_validator(mode="after")
    def _validate_planner_limits(self) -> "Settings":
        """Reject inconsistent planner limits when strict mode is enabled.

        上限値が 0 以下、または総単語数の上限が日数の上限を下回ると
        どの入力も受け付けられなくなるため、STRICT_MODE=true では起動時に拒否する。
        """

        if not self.strict_mode:
            return self
        if self.max_total_words < 1 or self.max_plan_days < 1:
            raise ValueError(
                "MAX_TOTAL_WORDS and MAX_PLAN_DAYS must be positive when STRICT_MODE=true",
            )
        if self.max_total_words < self.max_plan_days:
            raise ValueError(
                "MAX_TOTAL_WORDS must not be lower than MAX_PLAN_DAYS when STRICT_MODE=true",
            )
        return self


settings = Settings()
