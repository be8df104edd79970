import base64

import pandas as pd
import streamlit as st
import streamlit.components.v1 as components

from quantum_labels.config import get_settings
from quantum_labels.labels import render_label_sheet, render_preview
from quantum_labels.logging_config import setup_logging
from quantum_labels.state import SELECT_COLUMN, AppState

settings = get_settings()
setup_logging(settings.log_level)

# ======================================================
# Session state
# ======================================================
if "app_state" not in st.session_state:
    st.session_state.app_state = AppState(settings)

ALERT_RENDERERS = {"danger": st.error, "success": st.success, "info": st.info}

TABLE_COLUMNS = {
    "draw": "Desenho",
    "equipament": "Equipamento",
    "sku": "SKU",
    "description": "Descrição",
    "qte": "Quantidade",
}


def records_frame(records):
    rows = []
    for record in records:
        row = {"id": record.id}
        for attr, title in TABLE_COLUMNS.items():
            value = getattr(record, attr)
            if attr == "description":
                value = value[: settings.description_preview_chars]
            row[title] = value
        rows.append(row)
    return pd.DataFrame(rows, columns=["id", *TABLE_COLUMNS.values()])


# ======================================================
# Widget callbacks (run before the page is redrawn)
# ======================================================

def on_upload():
    uploaded = st.session_state.get("csv_upload")
    if uploaded is None:
        return
    st.session_state.app_state.load_upload(uploaded.getvalue(), uploaded.name)


def on_rows_edited(editor_key, row_ids):
    edits = st.session_state[editor_key]["edited_rows"]
    st.session_state.app_state.apply_row_edits(row_ids, edits)


def on_toggle_all():
    st.session_state.app_state.toggle_all()


def on_print():
    st.session_state.app_state.print_labels(render_label_sheet)


@st.fragment(run_every="1s")
def alert_banner():
    notification = st.session_state.app_state.notifier.current()
    if notification:
        ALERT_RENDERERS[notification.severity](notification.message)


def browser_print_launcher(pdf_bytes):
    b64_pdf = base64.b64encode(pdf_bytes).decode()
    html_content = f'''
    <button onclick="printLabels()" style="
        background-color: #0d6efd;
        color: white;
        padding: 8px 16px;
        border: none;
        border-radius: 5px;
        cursor: pointer;
    ">🖨️ Abrir diálogo de impressão</button>
    <script>
        function printLabels() {{
            const bytes = Uint8Array.from(atob("{b64_pdf}"), c => c.charCodeAt(0));
            const url = URL.createObjectURL(new Blob([bytes], {{type: "application/pdf"}}));
            const win = window.open(url);
            if (win) {{
                win.addEventListener("load", () => win.print());
            }}
        }}
    </script>
    '''
    components.html(html_content, height=60)


# ======================================================
# Streamlit UI
# ======================================================
st.set_page_config(page_title="Gestão Quantum", layout="wide")
app = st.session_state.app_state

header_col, logo_col = st.columns([3, 1])
with header_col:
    st.title("Gestão Quantum")
    st.subheader("Automação para impressão de etiquetas")
    st.file_uploader("Carregar CSV", type=["csv"], key="csv_upload", on_change=on_upload)
with logo_col:
    if settings.logo_path is not None and settings.logo_path.exists():
        st.image(str(settings.logo_path))

alert_banner()

search_term = st.text_input("Pesquisa", placeholder="Pesquise aqui", label_visibility="collapsed")
app.set_search(search_term)

visible = app.visible_records()
selected = app.selected_records()
printable = app.printable_records()

c1, c2, c3, c4 = st.columns(4)
c1.metric("Registros", len(app.records))
c2.metric("Visíveis", len(visible))
c3.metric("Selecionados", len(selected))
c4.metric("Etiquetas", len(printable))

if not app.records:
    st.info("Carregue um CSV para começar.")

# ==========================================
# All records
# ==========================================
st.checkbox(
    "Selecionar todos",
    value=app.is_all_selected(),
    key=f"select_all_{app.editor_version}_{app.search_term}",
    on_change=on_toggle_all,
)

df_for_selection = records_frame(visible)
df_for_selection.insert(
    0,
    SELECT_COLUMN,
    pd.Series([app.selection.is_selected(r.id) for r in visible], index=df_for_selection.index, dtype=bool),
)
editor_key = f"records_editor_{app.editor_version}"
st.data_editor(
    df_for_selection,
    column_config={
        SELECT_COLUMN: st.column_config.CheckboxColumn(SELECT_COLUMN, default=False),
        "id": None,
    },
    disabled=[col for col in df_for_selection.columns if col != SELECT_COLUMN],
    use_container_width=True,
    hide_index=True,
    height=400,
    key=editor_key,
    on_change=on_rows_edited,
    args=(editor_key, [r.id for r in visible]),
)

# ==========================================
# Selected records and printing
# ==========================================
title_col, button_col = st.columns([4, 1])
with title_col:
    st.subheader("Linhas Selecionadas")
with button_col:
    st.button("Imprimir", type="primary", key="print_button", on_click=on_print, use_container_width=True)

st.dataframe(
    records_frame(selected).drop(columns=["id"]),
    use_container_width=True,
    hide_index=True,
    height=400,
)

if app.last_pdf:
    st.subheader("Etiquetas")
    preview_col, actions_col = st.columns([3, 1])
    with preview_col:
        st.image(render_preview(app.last_pdf), caption="Pré-visualização da primeira página")
    with actions_col:
        st.download_button(
            "Baixar PDF",
            data=app.last_pdf,
            file_name=f"etiquetas_{settings.page_format}.pdf",
            mime="application/pdf",
        )
        browser_print_launcher(app.last_pdf)
