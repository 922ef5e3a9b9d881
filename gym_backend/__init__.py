"""Backend FastAPI de la salle de sport (panier, paiement, réservations, demandes, calculateurs)."""
