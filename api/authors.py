from __future__ import annotations

from flask import Blueprint, request

from models.author import Author
from models.schemas.author import AuthorSchema, AuthorOutSchema
from api.resources import ResourceHandler, success

bp = Blueprint("authors", __name__)

out_schema = AuthorOutSchema()
out_list_schema = AuthorOutSchema(many=True)

handler = ResourceHandler(
    Author,
    AuthorSchema(),
    unique_field="fullname",
    filters={"fullname": str, "country": str, "gender": str, "birthdate": str},
    label="Author",
    conflict_message="Author already exists",
)


@bp.get("/authors")
def list_authors():
    """
    List authors (exact-match filters on any listed field)
    ---
    tags: [Authors]
    parameters:
      - in: query
        name: fullname
        type: string
      - in: query
        name: country
        type: string
      - in: query
        name: gender
        type: string
        enum: [Male, Female, Other]
      - in: query
        name: birthdate
        type: string
    responses:
      200: { description: OK }
    """
    rows = handler.list(request.args)
    return success(out_list_schema.dump(rows), count=len(rows))


@bp.get("/authors/<author_id>")
def get_author(author_id: str):
    """
    Get an author by id
    ---
    tags: [Authors]
    parameters:
      - in: path
        name: author_id
        type: string
        required: true
    responses:
      200: { description: OK }
      400: { description: Invalid author ID }
      404: { description: Not found }
    """
    return success(out_schema.dump(handler.get(author_id)))


@bp.post("/authors")
def create_author():
    """
    Create an author
    ---
    tags: [Authors]
    consumes:
      - application/json
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required: [fullname, country, gender, birthdate]
          properties:
            fullname: { type: string, maxLength: 50 }
            country: { type: string, maxLength: 50 }
            gender: { type: string, enum: [Male, Female, Other] }
            birthdate: { type: string }
    responses:
      201: { description: Created }
      400: { description: Validation failed }
      409: { description: Author already exists }
    """
    author = handler.create(request.get_json(silent=True))
    return success(out_schema.dump(author), message="Author created successfully", status=201)


@bp.put("/authors/<author_id>")
def update_author(author_id: str):
    """
    Update an author (partial)
    ---
    tags: [Authors]
    parameters:
      - in: path
        name: author_id
        type: string
        required: true
      - in: body
        name: body
        required: true
        schema:
          type: object
          properties:
            fullname: { type: string, maxLength: 50 }
            country: { type: string, maxLength: 50 }
            gender: { type: string, enum: [Male, Female, Other] }
            birthdate: { type: string }
    responses:
      200: { description: OK }
      400: { description: Validation failed or invalid author ID }
      404: { description: Not found }
      409: { description: Author already exists }
    """
    author = handler.update(author_id, request.get_json(silent=True))
    return success(out_schema.dump(author), message="Author updated successfully")


@bp.delete("/authors/<author_id>")
def delete_author(author_id: str):
    """
    Delete an author
    ---
    tags: [Authors]
    parameters:
      - in: path
        name: author_id
        type: string
        required: true
    responses:
      200: { description: Deleted }
      400: { description: Invalid author ID }
      404: { description: Not found }
    """
    handler.delete(author_id)
    return success(message="Author deleted successfully")
