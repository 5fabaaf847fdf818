"""StockWatch: personal IDX stock watchlist service."""
