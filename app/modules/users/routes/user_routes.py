# -*- coding: utf-8 -*-
"""
backend/app/modules/users/routes/user_routes.py

Rutas del módulo de usuarios.

Este módulo expone endpoints autenticados para:
- Consultar el perfil propio (GET /users/me)
- Actualizar usuario + perfil (PUT /user/{id})

⚠️ Todos los endpoints requieren autenticación JWT

Los handlers solo validan lo barato (presencia y formato del id);
el resto lo decide UserService y los errores se propagan al manejador
central como sobres JSON.

Autor: UserHub
Fecha: 2026-09-02
"""

from fastapi import APIRouter, Depends

from app.modules.auth import AuthenticatedUser, get_current_user
from app.modules.users.dependencies import (
    PROFILE_PIC_FIELD,
    UserUpdateInput,
    get_user_service,
    parse_user_update,
)
from app.modules.users.schemas import UserProfileProjection, UserProfileUpdateRequest
from app.modules.users.services import UserService
from app.shared.utils.http_exceptions import BadRequest, ResourceNotFound
from app.shared.utils.json_response import send_json_response
from app.shared.utils.validators import is_valid_uuid

router = APIRouter(tags=["User"])


def _update_request_body() -> dict:
    """
    requestBody de PUT /user/{id} para OpenAPI.

    El cuerpo se lee a mano en `parse_user_update`, así que FastAPI no lo
    documenta por sí solo: JSON con el esquema del request, o multipart con
    los mismos campos como texto y la foto en `profile_pic_url`.
    """
    json_schema = UserProfileUpdateRequest.model_json_schema(by_alias=True)
    form_fields = {name: {"type": "string"} for name in json_schema["properties"]}
    form_fields["social_links"]["description"] = "Objeto JSON serializado (plataforma -> URL)"
    form_fields["timezones"]["description"] = "Array JSON serializado"
    form_fields[PROFILE_PIC_FIELD] = {"type": "string", "format": "binary"}
    return {
        "required": False,
        "content": {
            "application/json": {"schema": json_schema},
            "multipart/form-data": {"schema": {"type": "object", "properties": form_fields}},
        },
    }


# ===== Profile Routes =====

@router.get(
    "/users/me",
    summary="Get User Profile",
    description="Perfil del usuario autenticado (usuario + perfil)",
)
async def get_profile(
    current_user: AuthenticatedUser = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    user_id = current_user.id

    if not user_id:
        raise BadRequest("Unauthorized! No ID provided")

    if not is_valid_uuid(user_id):
        raise BadRequest("Unauthorized! Invalid User Id Format")

    user = await service.get_user_by_id(user_id)
    if user is None:
        raise ResourceNotFound("User Not Found!")

    if user.is_soft_deleted:
        raise ResourceNotFound("User not found!")

    return send_json_response(
        200,
        "User profile details retrieved successfully",
        UserProfileProjection.from_user(user),
    )


@router.put(
    "/user/{id}",
    summary="Update User Profile",
    description="Actualiza el perfil de un usuario (JSON o multipart con `profile_pic_url`)",
    openapi_extra={"requestBody": _update_request_body()},
)
async def update_user(
    id: str,
    _: AuthenticatedUser = Depends(get_current_user),
    body: UserUpdateInput = Depends(parse_user_update),
    service: UserService = Depends(get_user_service),
):
    user = await service.update_user_profile(id, body.payload, body.file)
    return send_json_response(200, "Profile successfully updated", user)


__all__ = ["router"]
# Fin del archivo backend/app/modules/users/routes/user_routes.py
