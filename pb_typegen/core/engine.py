from __future__ import annotations
import logging
from pathlib import Path
from typing import Awaitable, Callable, List, Optional
from pb_typegen.core.config import Settings
from pb_typegen.core.pocketbase import fetch_collections
from pb_typegen.core.workflow import TypegenResult, TypegenStage
from pb_typegen.generators.ts_types.generator import build_interfaces
from pb_typegen.generators.ts_types.render import render_types
from pb_typegen.generators.ts_types.writer import write_types
from pb_typegen.schemas.collections import CollectionDescriptor

log = logging.getLogger(__name__)

Fetcher = Callable[[Settings], Awaitable[List[CollectionDescriptor]]]

class TypegenEngine:
    def __init__(self, settings: Settings, fetcher: Optional[Fetcher] = None):
        self.settings = settings
        self.fetcher = fetcher or fetch_collections
        self.stage = TypegenStage.FETCH_SCHEMA

    def _set_stage(self, stage: TypegenStage) -> None:
        self.stage = stage
        log.info("Running stage", extra={"stage": stage.value})

    async def run(self) -> TypegenResult:
        try:
            self._set_stage(TypegenStage.FETCH_SCHEMA)
            collections = await self.fetcher(self.settings)

            self._set_stage(TypegenStage.GENERATE)
            interfaces = build_interfaces(collections)
            content = render_types(interfaces)
            skipped = [c.name for c in collections if not c.is_view and c.fields is None]

            self._set_stage(TypegenStage.WRITE)
            out_path = Path(self.settings.output)
            write_types(content, out_path)
        except Exception:
            log.error("Stage failed", extra={"stage": self.stage.value})
            self.stage = TypegenStage.FAILED
            raise

        self.stage = TypegenStage.DONE
        log.info("Wrote %d interfaces to %s", len(interfaces), out_path, extra={"stage": self.stage.value})
        return TypegenResult(output_path=out_path, interface_count=len(interfaces), skipped=skipped)
