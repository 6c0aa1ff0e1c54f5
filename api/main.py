"""FastAPI アプリケーション - ステップ実行 REST API エンドポイント"""
from pathlib import Path
from typing import Callable, Dict, Any, Optional, List

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

import sys

# プロジェクトルートをPythonパスに追加
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from infrastructure.bootstrap import build_execution_deps
from infrastructure.config.provider_settings import ProviderSettings
from infrastructure.credentials.dict_credential_provider import DictCredentialProvider
from infrastructure.credentials.env_credential_provider import EnvCredentialProvider
from infrastructure.logging.loguru_logger import LoguruLogger
from application.executor.handler_registry import HandlerRegistry
from application.executor.step_executor import StepExecutor
from application.outcome import StepOutcome
from application.services.execution_deps import CredentialProviderPort
from domain.exceptions import ConfigurationError
from domain.steps.base import Step, StepDefinition


# リクエストモデル
class RunStepRequest(BaseModel):
    """ステップ実行リクエスト"""
    data: Dict[str, Any] = Field(default_factory=dict, description="ステップ入力")
    credentials: Dict[str, str] = Field(
        default_factory=dict,
        description="clientId / clientSecret / refreshToken",
    )
    credential_ref: Optional[str] = Field(
        default=None,
        description="Credential provider reference. Use 'inline' or 'env'.",
    )


class StepRecordResponse(BaseModel):
    id: str = Field(description="Record id")
    name: str = Field(description="Record name")
    key_value: Dict[str, Any] = Field(default_factory=dict, description="Record fields")


class RunStepResponse(BaseModel):
    """ステップ実行レスポンス"""
    outcome: str = Field(description="passed / failed / error")
    message: str = Field(description="結果メッセージ")
    records: List[StepRecordResponse] = Field(default_factory=list, description="出力レコード")


class FieldDefinitionResponse(BaseModel):
    key: str
    type: str
    optionality: str
    description: str = ""


class RecordDefinitionResponse(BaseModel):
    id: str
    type: str
    fields: List[FieldDefinitionResponse] = Field(default_factory=list)
    dynamic_fields: bool = False


class StepDefinitionResponse(BaseModel):
    step_id: str
    name: str
    expression: str
    type: str
    expected_fields: List[FieldDefinitionResponse] = Field(default_factory=list)
    expected_records: List[RecordDefinitionResponse] = Field(default_factory=list)


# FastAPIアプリケーション
app = FastAPI(
    title="GoTo Webinar Steps",
    description="GoTo Webinar 登録者の作成・削除・検証ステップ",
    version="1.0.0"
)

REGISTRY = HandlerRegistry.default()


@app.get("/")
def read_root():
    """ヘルスチェック"""
    return {"status": "ok", "service": "webinar-steps"}


class CredentialProviderResolver:
    def __init__(
        self,
        factories: Dict[str, Callable[[RunStepRequest], CredentialProviderPort]],
        default_key: str,
    ) -> None:
        self._factories = factories
        self._default_key = default_key

    def resolve(self, request: RunStepRequest) -> CredentialProviderPort:
        key = request.credential_ref or self._default_key
        factory = self._factories.get(key)
        if not factory:
            raise HTTPException(status_code=400, detail=f"Unknown credential_ref: {key}")
        return factory(request)


def _build_credential_provider_resolver() -> CredentialProviderResolver:
    return CredentialProviderResolver(
        factories={
            "inline": lambda request: DictCredentialProvider(request.credentials),
            "env": lambda _request: EnvCredentialProvider(),
        },
        default_key="inline",
    )


def _definition_to_response(definition: StepDefinition) -> StepDefinitionResponse:
    def field_resp(f) -> FieldDefinitionResponse:
        return FieldDefinitionResponse(
            key=f.key,
            type=f.type.value,
            optionality=f.optionality.value,
            description=f.description,
        )

    return StepDefinitionResponse(
        step_id=definition.step_id,
        name=definition.name,
        expression=definition.expression,
        type=definition.type.value,
        expected_fields=[field_resp(f) for f in definition.expected_fields],
        expected_records=[
            RecordDefinitionResponse(
                id=r.id,
                type=r.type,
                fields=[field_resp(f) for f in r.fields],
                dynamic_fields=r.dynamic_fields,
            )
            for r in definition.expected_records
        ],
    )


def _outcome_to_response(outcome: StepOutcome) -> RunStepResponse:
    return RunStepResponse(
        outcome=outcome.status.value,
        message=outcome.message,
        records=[
            StepRecordResponse(id=r.id, name=r.name, key_value=r.key_value)
            for r in outcome.records
        ],
    )


@app.get("/steps", response_model=List[StepDefinitionResponse])
def list_steps() -> List[StepDefinitionResponse]:
    """登録済みステップの定義一覧"""
    return [_definition_to_response(d) for d in REGISTRY.definitions()]


@app.post("/steps/{step_id}/run", response_model=RunStepResponse)
def run_step(step_id: str, request: RunStepRequest) -> RunStepResponse:
    """ステップを 1 回実行する（クライアントはリクエスト毎に生成）"""
    step = Step(step_id=step_id, data=request.data)
    try:
        REGISTRY.get_handler(step)
    except RuntimeError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e

    provider = _build_credential_provider_resolver().resolve(request)
    logger = LoguruLogger()

    try:
        settings = ProviderSettings.from_env()
    except ConfigurationError as e:
        raise HTTPException(status_code=500, detail=str(e)) from e

    deps = build_execution_deps(provider.get(), logger, settings)
    outcome = StepExecutor(REGISTRY).execute(step, deps)
    return _outcome_to_response(outcome)
