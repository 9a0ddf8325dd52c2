from fastapi import APIRouter

from foundation_api.modules.auth import router as auth_router
from foundation_api.modules.collaborations import router as collaborations_router
from foundation_api.modules.contact import router as contact_router
from foundation_api.modules.contact_us import router as contact_us_router
from foundation_api.modules.donations import router as donations_router
from foundation_api.modules.events import router as events_router
from foundation_api.modules.interns import router as interns_router
from foundation_api.modules.media import router as media_router
from foundation_api.modules.news_submissions import router as news_submissions_router
from foundation_api.modules.newsletter import router as newsletter_router
from foundation_api.modules.volunteers import router as volunteers_router

api_router = APIRouter()

api_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])

api_router.include_router(contact_router, prefix="/contact", tags=["Contact"])
api_router.include_router(contact_us_router, prefix="/contact-us", tags=["Contact Us"])
api_router.include_router(donations_router, prefix="/donations", tags=["Donations"])
api_router.include_router(volunteers_router, prefix="/volunteers", tags=["Volunteers"])
api_router.include_router(interns_router, prefix="/interns", tags=["Interns"])
api_router.include_router(events_router, prefix="/events", tags=["Events"])
api_router.include_router(
    collaborations_router, prefix="/collaborations", tags=["Collaborations"]
)
api_router.include_router(media_router, prefix="/media", tags=["Media"])
api_router.include_router(
    news_submissions_router, prefix="/news-submissions", tags=["News Submissions"]
)
api_router.include_router(newsletter_router, prefix="/newsletter", tags=["Newsletter"])
