# Routers package voor helprob
