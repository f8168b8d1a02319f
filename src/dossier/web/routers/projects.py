from fastapi import APIRouter

from dossier.core.modules.project.models import ProjectCreate, ProjectList, ProjectMutation, ProjectUpdate
from dossier.web.deps import AppDep, AuthTokenDep
from dossier.web.openapi import ErrorResponse

router = APIRouter(tags=["projects"])


@router.get(
    "/projects",
    summary="List projects",
    description="Get all project records, newest first.",
    operation_id="listProjects",
    responses={
        200: {"description": "List of project records"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
    },
)
async def list_projects(app: AppDep, auth_token: AuthTokenDep) -> ProjectList:
    return ProjectList(items=await app.get_projects(auth_token))


@router.post(
    "/projects",
    summary="Create project",
    description="Create a record. Needs a title or a url; the title is derived from the url or type when omitted.",
    operation_id="createProject",
    status_code=201,
    responses={
        201: {"description": "Project created"},
        400: {"model": ErrorResponse, "description": "Neither title nor url given"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        403: {"model": ErrorResponse, "description": "Owner role required"},
    },
)
async def create_project(data: ProjectCreate, app: AppDep, auth_token: AuthTokenDep) -> ProjectMutation:
    item, items = await app.create_project(auth_token, data)
    return ProjectMutation(item=item, items=items)


@router.patch(
    "/projects/{project_id}",
    summary="Update project",
    description="Overwrite only the supplied fields. The id and createdAt never change.",
    operation_id="updateProject",
    responses={
        200: {"description": "Project updated"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        403: {"model": ErrorResponse, "description": "Owner role required"},
        404: {"model": ErrorResponse, "description": "Project not found"},
    },
)
async def update_project(project_id: str, data: ProjectUpdate, app: AppDep, auth_token: AuthTokenDep) -> ProjectMutation:
    item, items = await app.update_project(auth_token, project_id, data)
    return ProjectMutation(item=item, items=items)


@router.delete(
    "/projects/{project_id}",
    summary="Delete project",
    description="Remove a record. Uploaded files it points to are kept.",
    operation_id="deleteProject",
    responses={
        200: {"description": "Project deleted, remaining records returned"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        403: {"model": ErrorResponse, "description": "Owner role required"},
        404: {"model": ErrorResponse, "description": "Project not found"},
    },
)
async def delete_project(project_id: str, app: AppDep, auth_token: AuthTokenDep) -> ProjectList:
    return ProjectList(items=await app.delete_project(auth_token, project_id))
