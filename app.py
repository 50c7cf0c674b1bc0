"""Streamlit dashboard for rating and ranking house listings."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pandas as pd
import streamlit as st

sys.path.insert(0, str(Path(__file__).resolve().parent))

from src.houserank.config import (  # noqa: E402
    WEIGHT_MAX,
    WEIGHT_MIN,
    WEIGHT_STEP,
    WeightConfiguration,
    settings,
)
from src.houserank.engine import evaluate, summarize  # noqa: E402
from src.houserank.ingest import IngestError, read_listings_csv  # noqa: E402
from src.houserank.models import (  # noqa: E402
    SORT_KEYS,
    EvaluationOptions,
    Listing,
    ScoredListing,
)
from src.houserank.store import ListingStore  # noqa: E402

logging.basicConfig(level=logging.INFO)

st.set_page_config(page_title="House Rater", layout="wide")
st.title("House Rater")

WEIGHT_LABELS = {
    "garage_spaces": "Garage spaces",
    "walk_in_closet": "Walk-in closet",
    "kitchen_island": "Kitchen island",
    "distance": "Distance",
    "yard_maintenance": "Low-maintenance yard",
    "hoa_fees": "HOA fees",
    "size": "Size",
    "year_built": "Year built",
    "price": "Price",
}

_CSV_HELP = """\
Upload a CSV with a header row.  Recognised columns:

`id, address, city, price, bedrooms, bathrooms, size, style, year_built,
garage_spaces, walk_in_closet, kitchen_island, yard_maintenance, hoa_fee,
distance, sold, thumbnail_url`

Rows without an address are skipped.
"""

store = ListingStore(settings.data_file)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _results_frame(rows: list[ScoredListing]) -> pd.DataFrame:
    records = []
    for rank, row in enumerate(rows, 1):
        h = row.listing
        records.append({
            "#": rank,
            "Score": round(row.score, 1),
            "Address": h.address,
            "City": h.city,
            "Price": h.price,
            "Beds": h.bedrooms,
            "Baths": h.bathrooms,
            "Size": h.size,
            "Style": h.style,
            "Built": h.year_built,
            "Garage": h.garage_spaces,
            "HOA": h.hoa_fee,
            "Distance": h.distance,
            "Over budget": "yes" if row.over_budget else "",
            "Sold": "SOLD" if h.sold else "",
        })
    return pd.DataFrame.from_records(records)


def _listing_form(key: str, current: Listing | None = None) -> Listing | None:
    h = current or Listing()
    with st.form(key, clear_on_submit=current is None):
        col1, col2, col3 = st.columns(3)
        with col1:
            address = st.text_input("Address *", value=h.address)
            city = st.text_input("City", value=h.city)
            style = st.text_input("Style", value=h.style)
            distance = st.text_input("Distance (e.g. 15 min)", value=h.distance)
            thumbnail = st.text_input("Thumbnail URL", value=h.thumbnail_url or "")
        with col2:
            price = st.number_input("Price", min_value=0.0, value=float(h.price or 0), step=5000.0)
            size = st.number_input("Size (sq ft)", min_value=0.0, value=float(h.size or 0), step=50.0)
            year_built = st.number_input("Year built", min_value=0, value=int(h.year_built or 0))
            hoa_fee = st.number_input("HOA fee", min_value=0.0, value=float(h.hoa_fee or 0))
            garage = st.number_input("Garage spaces", min_value=0, value=int(h.garage_spaces or 0))
        with col3:
            bedrooms = st.number_input("Bedrooms", min_value=0, value=int(h.bedrooms or 0))
            bathrooms = st.number_input("Bathrooms", min_value=0.0, value=float(h.bathrooms or 0), step=0.5)
            walk_in = st.checkbox("Walk-in closet", value=h.walk_in_closet)
            island = st.checkbox("Kitchen island", value=h.kitchen_island)
            yard = st.checkbox("High-maintenance yard", value=h.yard_maintenance)
            sold = st.checkbox("Sold", value=h.sold)

        submitted = st.form_submit_button("Save" if current else "Add Listing")
        if not submitted:
            return None
        if not address.strip():
            st.error("Address is required.")
            return None
        return Listing(
            id=h.id,
            address=address,
            city=city,
            price=price,
            bedrooms=bedrooms,
            bathrooms=bathrooms,
            size=size,
            style=style,
            year_built=year_built,
            garage_spaces=garage,
            walk_in_closet=walk_in,
            kitchen_island=island,
            yard_maintenance=yard,
            hoa_fee=hoa_fee,
            distance=distance,
            sold=sold,
            thumbnail_url=thumbnail,
        )


# ---------------------------------------------------------------------------
# Sidebar
# ---------------------------------------------------------------------------

with st.sidebar:
    st.header("Preference Weights")
    defaults = settings.weights.model_dump()
    weights = WeightConfiguration(**{
        name: st.slider(label, WEIGHT_MIN, WEIGHT_MAX, float(defaults[name]), WEIGHT_STEP)
        for name, label in WEIGHT_LABELS.items()
    })
    st.caption(f"Total weight: {weights.total:g}")
    st.markdown("---")
    budget_limit = st.number_input(
        "Maximum price", min_value=0.0, value=settings.budget_limit, step=10000.0,
    )


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

listings = store.load()

with st.expander("Upload CSV (bulk import)"):
    st.markdown(_CSV_HELP)
    uploaded = st.file_uploader("Upload CSV", type=["csv"])
    if uploaded and st.button("Import", type="primary"):
        try:
            imported = read_listings_csv(uploaded)
            added = store.add_many(imported)
            st.success(f"Imported {added} of {len(imported)} listings")
            st.rerun()
        except IngestError as e:
            st.error(str(e))
        except Exception as e:
            st.error(f"Error parsing CSV file: {e}")

with st.expander("Add a listing"):
    new_listing = _listing_form("add_listing")
    if new_listing is not None:
        if store.add(new_listing):
            st.rerun()
        st.error("Could not save listing.")

col_search, col_sort = st.columns([3, 1])
search_term = col_search.text_input("Search address, city or style")
sort_by = col_sort.selectbox(
    "Sort by", SORT_KEYS, index=SORT_KEYS.index(settings.default_sort),
)

options = EvaluationOptions(
    search_term=search_term, sort_by=sort_by, budget_limit=budget_limit,
)
ranked = evaluate(listings, weights, options)
summary = summarize(listings, ranked, weights)

m1, m2, m3, m4 = st.columns(4)
m1.metric("Total Houses", summary.total_listings)
m2.metric("Top Score", f"{summary.top_score:.1f}" if summary.top_score is not None else "—")
m3.metric("Total Weight", f"{summary.total_weight:g}")
m4.metric("Over Budget", summary.over_budget_count)

if not ranked:
    st.info("No listings to show.")
else:
    st.dataframe(_results_frame(ranked), use_container_width=True, hide_index=True)

    st.subheader("Listings")
    for row in ranked:
        h = row.listing
        label = f"{row.score:.1f} — {h.address}, {h.city}"
        if h.sold:
            label += " (SOLD)"
        with st.expander(label):
            if h.thumbnail_url:
                st.image(h.thumbnail_url, width=240)
            if row.over_budget:
                st.warning("Over budget")
            st.bar_chart(pd.Series(row.breakdown.model_dump(), name="sub-score"))

            edited = _listing_form(f"edit_{h.id}", current=h)
            if edited is not None:
                if store.update(h.id, edited):
                    st.rerun()
                st.error("Could not update listing.")
            if st.button("Delete", key=f"delete_{h.id}"):
                if store.delete(h.id):
                    st.rerun()
                st.error("Could not delete listing.")
