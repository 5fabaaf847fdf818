"""Seed prices and per-ticker parameters for the offline quote simulator."""

# Approximate IDX closing prices in rupiah, used as the first previous close
SEED_PRICES: dict[str, float] = {
    "BBCA": 9200.0,
    "BBRI": 4500.0,
    "BMRI": 6000.0,
    "BBNI": 4800.0,
    "TLKM": 3000.0,
    "EXCL": 2300.0,
    "ASII": 5000.0,
    "UNVR": 2500.0,
    "ICBP": 11000.0,
    "INDF": 6500.0,
    "ADRO": 2600.0,
    "PTBA": 2700.0,
    "ANTM": 1500.0,
    "GOTO": 70.0,
    "BUKA": 130.0,
}

# Pass-through descriptive fields, shaped like the real feed's Name/SectorName
STOCK_INFO: dict[str, tuple[str, str]] = {
    "BBCA": ("Bank Central Asia Tbk.", "Financials"),
    "BBRI": ("Bank Rakyat Indonesia (Persero) Tbk.", "Financials"),
    "BMRI": ("Bank Mandiri (Persero) Tbk.", "Financials"),
    "BBNI": ("Bank Negara Indonesia (Persero) Tbk.", "Financials"),
    "TLKM": ("Telkom Indonesia (Persero) Tbk.", "Infrastructures"),
    "EXCL": ("XL Axiata Tbk.", "Infrastructures"),
    "ASII": ("Astra International Tbk.", "Industrials"),
    "UNVR": ("Unilever Indonesia Tbk.", "Consumer Non-Cyclicals"),
    "ICBP": ("Indofood CBP Sukses Makmur Tbk.", "Consumer Non-Cyclicals"),
    "INDF": ("Indofood Sukses Makmur Tbk.", "Consumer Non-Cyclicals"),
    "ADRO": ("Adaro Energy Indonesia Tbk.", "Energy"),
    "PTBA": ("Bukit Asam Tbk.", "Energy"),
    "ANTM": ("Aneka Tambang Tbk.", "Basic Materials"),
    "GOTO": ("GoTo Gojek Tokopedia Tbk.", "Technology"),
    "BUKA": ("Bukalapak.com Tbk.", "Technology"),
}

# Per-ticker GBM parameters
# sigma: annualized volatility, mu: annualized drift
TICKER_PARAMS: dict[str, dict[str, float]] = {
    "BBCA": {"sigma": 0.18, "mu": 0.08},  # Low volatility blue chip
    "BBRI": {"sigma": 0.25, "mu": 0.06},
    "BMRI": {"sigma": 0.25, "mu": 0.06},
    "BBNI": {"sigma": 0.27, "mu": 0.05},
    "TLKM": {"sigma": 0.22, "mu": 0.03},
    "EXCL": {"sigma": 0.30, "mu": 0.03},
    "ASII": {"sigma": 0.25, "mu": 0.04},
    "UNVR": {"sigma": 0.28, "mu": -0.02},
    "ICBP": {"sigma": 0.20, "mu": 0.04},
    "INDF": {"sigma": 0.20, "mu": 0.04},
    "ADRO": {"sigma": 0.40, "mu": 0.05},  # Coal follows commodity swings
    "PTBA": {"sigma": 0.35, "mu": 0.04},
    "ANTM": {"sigma": 0.40, "mu": 0.04},
    "GOTO": {"sigma": 0.60, "mu": 0.00},  # High volatility tech
    "BUKA": {"sigma": 0.55, "mu": 0.00},
}

DEFAULT_PARAMS: dict[str, float] = {"sigma": 0.30, "mu": 0.04}

# Tickers in the same group move together more than across groups
CORRELATION_GROUPS: dict[str, set[str]] = {
    "banks": {"BBCA", "BBRI", "BMRI", "BBNI"},
    "commodities": {"ADRO", "PTBA", "ANTM"},
    "tech": {"GOTO", "BUKA"},
}

INTRA_BANK_CORR = 0.7
INTRA_COMMODITY_CORR = 0.6
INTRA_TECH_CORR = 0.5
CROSS_GROUP_CORR = 0.3

# IDX price fractions (tick size by price band): (upper bound exclusive, tick)
TICK_SIZES: tuple[tuple[float, float], ...] = (
    (200.0, 1.0),
    (500.0, 2.0),
    (2000.0, 5.0),
    (5000.0, 10.0),
    (float("inf"), 25.0),
)
