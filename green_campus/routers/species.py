from fastapi import APIRouter, Depends
from typing import List

from green_campus.dependencies import get_species_service
from green_campus.schemas.species import SpeciesResponse
from green_campus.services import SpeciesService

router = APIRouter(prefix="/api/species", tags=["species"])


@router.get("", response_model=List[SpeciesResponse])
async def list_species(species: SpeciesService = Depends(get_species_service)):
    """Species catalog, ordered by name"""
    return await species.list()


@router.get("/{species_id}", response_model=SpeciesResponse)
async def get_species(species_id: int, species: SpeciesService = Depends(get_species_service)):
    return await species.get(species_id)
