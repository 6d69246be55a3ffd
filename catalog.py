from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class DesignItem:
    """One purchasable design product and its price in credits."""

    name: str
    sizes: Tuple[str, ...]
    credits_per_creative: int
    category: str

    def to_document(self):
        # pymongo writes _id into the dict it is given, so always hand out a fresh one
        return {
            "name": self.name,
            "sizes": list(self.sizes),
            "creditsPerCreative": self.credits_per_creative,
            "category": self.category,
        }


DESIGN_ITEMS = (
    DesignItem("Business card", ("Standard",), 2, "print"),
    DesignItem("Brochure (Bi fold)", ("A4/A5 - 4 pages",), 5, "print"),
    DesignItem("Brochure (Tri fold)", ("A4/A5 - 6 pages",), 10, "print"),
    DesignItem("Brochure -10 pages", ("A4/A5",), 15, "print"),
    DesignItem("Brochure -20 pages", ("A4/A5",), 30, "print"),
    DesignItem("Flyers", ("A4",), 15, "print"),
    DesignItem("Flyers", ("A5",), 12, "print"),
    DesignItem("Poster", ("A3",), 20, "print"),
    DesignItem("Poster", ("A4",), 15, "print"),
    DesignItem("Infographics", ("A4/A5",), 10, "print"),
    DesignItem("Booth Backdrops", ("Standard",), 20, "event"),
    DesignItem("Standees", ("Standard",), 15, "event"),
    DesignItem("ID card", ("Standard",), 3, "print"),
    DesignItem("Brand Presentation/Deck - up to 10 slides", ("Standard",), 40, "presentation"),
    DesignItem("Pitch Deck - up to 10 slides", ("Standard",), 50, "presentation"),
    DesignItem("Brand Deck - up to 20 slides", ("Standard",), 80, "presentation"),
    DesignItem("Product Catalog - up to 4 pages", ("A4/A5",), 25, "print"),
    DesignItem("Product Catalog - up to 6 pages", ("A4/A5",), 35, "print"),
    DesignItem("Product Catalog - up to 10 pages", ("A4/A5",), 40, "print"),
    DesignItem("Table Banner", ("Standard",), 15, "event"),
    DesignItem("Social media profile picture", ("Standard social media",), 2, "social"),
    DesignItem("Social media cover image", ("Standard social media",), 5, "social"),
    DesignItem("Emailer", ("Standard",), 10, "digital"),
    DesignItem("Ad Creative - static", ("Standard social media",), 5, "social"),
    DesignItem("Static social media creative", ("Standard social media",), 3, "social"),
    DesignItem("Reels (30 sec)", ("30 sec - no shoot",), 10, "video"),
    DesignItem("Reels (60 sec)", ("60 sec - no shoot",), 15, "video"),
    DesignItem("Shorts", ("60 sec - YouTube",), 10, "video"),
    DesignItem("GIFs", ("Standard social media",), 10, "motion"),
    DesignItem("Text-based creative", ("Standard social media",), 5, "social"),
    DesignItem("Motion graphics", ("30 sec",), 25, "motion"),
    DesignItem("Letterhead", ("A4",), 5, "print"),
    DesignItem("Billboards", ("Standard",), 20, "print"),
    DesignItem("Carousel creative posts", ("Standard social media",), 15, "social"),
    DesignItem("Website Banners", ("Standard",), 15, "web"),
    DesignItem("Icons", ("Standard",), 5, "web"),
    DesignItem("2D Video Editing", ("Up to 5 minutes",), 100, "video"),
    DesignItem("Packaging design", ("As per requirement",), 250, "print"),
    DesignItem("Logo designing", ("As per requirement",), 300, "branding"),
    DesignItem("Brand Guidebook", ("As per requirement",), 400, "branding"),
    DesignItem("Logo Guidebook", ("As per requirement",), 350, "branding"),
    DesignItem("Website Landing Page", ("Single page",), 500, "web"),
)
