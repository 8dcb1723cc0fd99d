from pyrsistent import thaw
import streamlit as st
from st_keyup import st_keyup  # type: ignore

from avatarme.identicon import Identicon
from avatarme.pipeline import generate
from avatarme.renderer.raster import encode_png, render
from avatarme.utils.grid import cell_mask, grid_matrix

st.set_page_config(layout="centered", page_title="Avatarme")
st.markdown(
    """
    <style>
        header, footer, #MainMenu { visibility: hidden; }
        .stMainBlockContainer {
            padding-top: 1rem;
        }
    </style>
""",
    unsafe_allow_html=True,
)


def get_name() -> str:
    value: str = (
        st_keyup(
            "Name",
            key="name_input",
            placeholder="Type anything to see its identicon",
        )
        or ""
    )
    return value


def display_color(identicon: Identicon) -> None:
    r, g, b = identicon.color
    hex_color = f"#{r:02x}{g:02x}{b:02x}"
    st.markdown(
        f"""
        <div style="display:flex;align-items:center;gap:0.5rem;">
            <div style="width:1.5rem;height:1.5rem;border-radius:4px;background:{hex_color};"></div>
            <code>{hex_color}</code>
        </div>
        """,
        unsafe_allow_html=True,
    )


def display_grid(identicon: Identicon) -> None:
    matrix = grid_matrix(identicon)
    mask = cell_mask(identicon)
    rows = [
        " ".join(
            f"**{value:3d}**" if filled else f"{value:3d}"
            for value, filled in zip(row, mask_row)
        )
        for row, mask_row in zip(matrix.tolist(), mask.tolist())
    ]
    st.markdown("  \n".join(rows))
    st.caption("Bold cells are even and get filled.")


st.title("Avatarme")
name = get_name()

if not name:
    st.info("Start typing to generate an identicon.", icon="✏️")
    st.stop()

identicon = generate(name)

tab_preview, tab_record = st.tabs(["Preview", "Record"])

with tab_preview:
    image_col, info_col = st.columns([2, 1])
    with image_col:
        st.image(render(identicon), caption=f"{name}.png")
    with info_col:
        st.subheader("Color")
        display_color(identicon)
        st.subheader("Grid")
        display_grid(identicon)
        st.download_button(
            "Download PNG",
            data=encode_png(identicon),
            file_name=f"{name}.png",
            mime="image/png",
            use_container_width=True,
        )

with tab_record:
    st.json(thaw(identicon.description), expanded=1)
