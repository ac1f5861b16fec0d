"""REST endpoints for characters and the class/spec reference table."""

from typing import Literal

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel, Field

from raid_planner.api.serializers import character_to_dict
from raid_planner.models.character import CharacterSpecialization, MasteryLevel, WowClass
from raid_planner.services.character_service import CharacterDraft, CharacterService
from raid_planner.services.specialization_editor import SpecializationEditor
from raid_planner.utils.class_specs import CLASS_SPECS

router = APIRouter(prefix="/api", tags=["characters"])


class SpecializationPayload(BaseModel):
    spec: str
    mastery_level: MasteryLevel = MasteryLevel.BEGINNER
    is_preferred: bool = False

    def to_model(self) -> CharacterSpecialization:
        return CharacterSpecialization(
            spec=self.spec,
            mastery_level=self.mastery_level,
            is_preferred=self.is_preferred,
        )


class CharacterRequest(BaseModel):
    """Request body for creating or updating a character."""

    user_id: str
    name: str = Field(min_length=1, max_length=64)
    level: int = Field(default=80, ge=1, le=80)
    wow_class: WowClass
    item_level: int | None = Field(default=None, ge=1, le=600)
    is_main: bool = False
    server: str | None = None
    notes: str | None = None
    specializations: list[SpecializationPayload] = Field(default_factory=list)

    def to_draft(self) -> CharacterDraft:
        return CharacterDraft(
            name=self.name,
            level=self.level,
            wow_class=self.wow_class,
            item_level=self.item_level,
            is_main=self.is_main,
            server=self.server,
            notes=self.notes,
        )


class SpecializationEditRequest(BaseModel):
    """One edit applied to a specialization list (form helper)."""

    wow_class: WowClass
    specializations: list[SpecializationPayload] = Field(default_factory=list)
    action: Literal["add", "remove", "prefer", "update"]
    index: int | None = Field(default=None, ge=0)
    spec: str | None = None
    mastery_level: MasteryLevel | None = None


@router.get("/classes")
def list_classes():
    """Classes with their specializations and roles."""
    return {
        "classes": [
            {
                "name": wow_class.value,
                "specs": [{"name": spec.name, "role": spec.role} for spec in specs],
            }
            for wow_class, specs in CLASS_SPECS.items()
        ],
        "mastery_levels": [level.value for level in MasteryLevel],
    }


@router.get("/characters")
def list_characters(request: Request, user_id: str | None = None):
    """All characters, or those of one user."""
    repo = request.app.state.repository
    if user_id is not None:
        characters = repo.get_characters_for_user(user_id)
    else:
        characters = repo.list_characters()
    return {
        "characters": [character_to_dict(c) for c in characters],
        "count": len(characters),
        "mains": sum(1 for c in characters if c.is_main),
    }


@router.get("/characters/{character_id}")
def get_character(request: Request, character_id: str):
    character = request.app.state.repository.get_character(character_id)
    if not character:
        raise HTTPException(404, f"Character not found: {character_id}")
    return character_to_dict(character)


@router.post("/characters", status_code=201)
def create_character(request: Request, body: CharacterRequest):
    """Create a character; its primary role is derived from its specs."""
    service = CharacterService(request.app.state.repository)
    try:
        character = service.save_character(
            body.to_draft(),
            [s.to_model() for s in body.specializations],
            user_id=body.user_id,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return character_to_dict(character)


@router.put("/characters/{character_id}")
def update_character(request: Request, character_id: str, body: CharacterRequest):
    """Replace a character's editable fields."""
    service = CharacterService(request.app.state.repository)
    try:
        character = service.save_character(
            body.to_draft(),
            [s.to_model() for s in body.specializations],
            user_id=body.user_id,
            character_id=character_id,
        )
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return character_to_dict(character)


@router.delete("/characters/{character_id}")
def delete_character(request: Request, character_id: str):
    service = CharacterService(request.app.state.repository)
    if not service.delete_character(character_id):
        raise HTTPException(404, f"Character not found: {character_id}")
    return {"success": True, "character_id": character_id}


@router.post("/characters/specializations/edit")
def edit_specializations(body: SpecializationEditRequest):
    """Apply one add/remove/prefer/update edit and return the resulting list."""
    editor = SpecializationEditor(body.wow_class, [s.to_model() for s in body.specializations])

    try:
        if body.action == "add":
            if editor.add() is None:
                raise HTTPException(400, "Every specialization of this class is already assigned")
        else:
            if body.index is None:
                raise HTTPException(400, f"'{body.action}' requires an index")
            if body.action == "remove":
                editor.remove(body.index)
            elif body.action == "prefer":
                editor.set_preferred(body.index)
            else:
                editor.update(body.index, spec=body.spec, mastery_level=body.mastery_level)
    except IndexError:
        raise HTTPException(400, f"No specialization at index {body.index}")
    except ValueError as e:
        raise HTTPException(400, str(e))

    return {
        "wow_class": editor.wow_class,
        "specializations": editor.specializations,
        "available_specs": [spec.name for spec in editor.available_specs()],
        "primary_role": editor.primary_role(),
    }
